"""
Dense integer matrices with a plain-text file format.

>>> import intmat
>>> m = intmat.from_rows([[1, 2], [3, 4]])
>>> intmat.dump_to_text(m * 2)
'2 4 \\n6 8 \\n'
"""
import logging

from .errors import AllocationError, DimensionError, FormatError, MatrixError, RangeError
from .matrix import (
    Matrix,
    allocate,
    equal,
    from_numpy,
    from_rows,
    full,
    identity,
    init_constant,
    init_identity,
    init_random,
    init_zeros,
    negate,
    product,
    rand,
    release,
    scalar_product,
    sum,
    to_numpy,
    transpose,
    zeros,
)
from .codec import dump_to_text, load, parse_from_text, read, save, write

__version__ = "1.0.0"

__all__ = [
    "AllocationError",
    "DimensionError",
    "FormatError",
    "MatrixError",
    "RangeError",
    "Matrix",
    "allocate",
    "equal",
    "from_numpy",
    "from_rows",
    "full",
    "identity",
    "init_constant",
    "init_identity",
    "init_random",
    "init_zeros",
    "negate",
    "product",
    "rand",
    "release",
    "scalar_product",
    "to_numpy",
    "transpose",
    "zeros",
    "dump_to_text",
    "load",
    "parse_from_text",
    "read",
    "save",
    "write",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
