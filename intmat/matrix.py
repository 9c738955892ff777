"""
The Matrix type and the operations on it.

Storage is a single owned C-contiguous ``int64`` array. Matrices never share
storage: every operation that produces a matrix allocates a fresh one, and
``content``/``to_numpy`` hand out copies. Arithmetic wraps around on 64-bit
overflow, like the underlying numpy kernels.
"""
import logging
import operator
import os

import numpy as np

from .errors import AllocationError, DimensionError, RangeError

logger = logging.getLogger(__name__)

DTYPE = np.int64

INT_MIN = int(np.iinfo(DTYPE).min)
INT_MAX = int(np.iinfo(DTYPE).max)

SEED_ENV = "INTMAT_SEED"

_default_rng = None


def _parse_seed(value: str) -> int:
    try:
        seed = int(value)
    except ValueError:
        seed = -1
    if seed < 0:
        raise RangeError(f"default_rng: {SEED_ENV} must be a non-negative integer, got {value!r}")
    return seed


def default_rng() -> np.random.Generator:
    """Process-wide generator, seeded once from $INTMAT_SEED or OS entropy."""
    global _default_rng
    if _default_rng is None:
        seed = os.environ.get(SEED_ENV)
        _default_rng = np.random.default_rng(_parse_seed(seed) if seed else None)
        logger.debug("default generator seeded from %s", SEED_ENV if seed else "entropy")
    return _default_rng


def _new_storage(op, rows, columns):
    rows = operator.index(rows)
    columns = operator.index(columns)
    if rows < 0 or columns < 0:
        raise DimensionError(f"{op}: negative dimensions ({rows}, {columns})")
    try:
        return np.zeros((rows, columns), dtype=DTYPE)
    except (MemoryError, ValueError) as e:
        raise AllocationError(f"{op}: cannot allocate ({rows}, {columns}) matrix") from e


class Matrix:
    """
    A rows x columns grid of signed 64-bit integers.

    ``Matrix()`` is the empty matrix (0 x 0, no storage); ``Matrix(r, c)``
    allocates a zeroed r x c matrix. Can be used as a context manager, in
    which case the storage is released on exit.
    """

    __hash__ = None

    def __init__(self, rows=0, columns=0):
        self._data = None
        if rows or columns:
            self.allocate(rows, columns)

    @classmethod
    def _adopt(cls, data):
        m = cls()
        m._data = data
        return m

    @property
    def rows(self) -> int:
        return 0 if self._data is None else self._data.shape[0]

    @property
    def columns(self) -> int:
        return 0 if self._data is None else self._data.shape[1]

    @property
    def shape(self):
        return (self.rows, self.columns)

    @property
    def is_empty(self) -> bool:
        return self._data is None

    @property
    def content(self):
        return self._view().tolist()

    def _view(self):
        if self._data is None:
            return np.zeros((0, 0), dtype=DTYPE)
        return self._data

    def allocate(self, rows, columns):
        # A failed allocation leaves the matrix empty.
        self._data = None
        self._data = _new_storage("allocate", rows, columns)
        logger.debug("allocated %dx%d matrix", rows, columns)
        return self

    def release(self):
        if self._data is not None:
            logger.debug("released %dx%d matrix", *self._data.shape)
        self._data = None

    def _check_index(self, i, j):
        i = operator.index(i)
        j = operator.index(j)
        if not (0 <= i < self.rows and 0 <= j < self.columns):
            raise IndexError(f"index ({i}, {j}) out of range for {self.rows}x{self.columns} matrix")
        return i, j

    def get(self, i, j) -> int:
        i, j = self._check_index(i, j)
        return int(self._data[i, j])

    def set(self, i, j, value):
        i, j = self._check_index(i, j)
        self._data[i, j] = operator.index(value)

    def fill(self, value):
        init_constant(self, value)

    def transpose(self):
        return transpose(self)

    def matmul(self, other):
        return product(self, other)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.release()

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return equal(self, other)

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return sum(self, other)

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return NotImplemented
        try:
            operator.index(other)
        except TypeError:
            return NotImplemented
        return scalar_product(self, other)

    __rmul__ = __mul__

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return product(self, other)

    def __neg__(self):
        return negate(self)

    def __repr__(self):
        if self._data is None:
            return "Matrix()"
        return f"Matrix({self.content!r})"


def _storage(op, m):
    if not isinstance(m, Matrix):
        raise TypeError(f"{op}: expected Matrix, got {type(m).__name__}")
    return m._view()


def _result(op, compute):
    try:
        data = np.ascontiguousarray(compute(), dtype=DTYPE)
    except MemoryError as e:
        raise AllocationError(f"{op}: cannot allocate result") from e
    return Matrix._adopt(data)


# ---------------------------------------------------------------------------
# Allocation & lifecycle

def allocate(rows, columns) -> Matrix:
    return Matrix().allocate(rows, columns)


def release(m: Matrix):
    m.release()


def zeros(shape) -> Matrix:
    rows, columns = shape
    return allocate(rows, columns)


def full(shape, value) -> Matrix:
    m = zeros(shape)
    init_constant(m, value)
    return m


def identity(n) -> Matrix:
    m = allocate(n, n)
    init_identity(m)
    return m


def rand(shape, val_min=0, val_max=9, rng=None) -> Matrix:
    m = zeros(shape)
    init_random(m, val_min, val_max, rng=rng)
    return m


def from_rows(rows) -> Matrix:
    """Build a matrix from a sequence of equal-length integer sequences."""
    rows = [[operator.index(v) for v in row] for row in rows]
    columns = len(rows[0]) if rows else 0
    for i, row in enumerate(rows):
        if len(row) != columns:
            raise DimensionError(f"from_rows: row {i} has {len(row)} values, expected {columns}")
    m = allocate(len(rows), columns)
    if rows and columns:
        m._data[...] = rows
    return m


def from_numpy(x) -> Matrix:
    x = np.asarray(x)
    if x.ndim != 2:
        raise DimensionError(f"from_numpy: expected a 2-D array, got shape {x.shape}")
    if x.dtype.kind not in "biu":
        raise TypeError(f"from_numpy: expected an integer array, got dtype {x.dtype}")
    if x.size and not np.can_cast(x.dtype, DTYPE) and int(x.max()) > INT_MAX:
        raise OverflowError(f"from_numpy: value {int(x.max())} does not fit in 64 bits")
    m = allocate(*x.shape)
    m._data[...] = x
    return m


def to_numpy(m: Matrix) -> np.ndarray:
    return _storage("to_numpy", m).copy()


def init_constant(m: Matrix, value):
    value = operator.index(value)
    if m._data is not None:
        m._data.fill(value)


def init_zeros(m: Matrix):
    init_constant(m, 0)


def init_identity(m: Matrix):
    if m.rows != m.columns:
        raise DimensionError(f"init_identity: matrix is not square {m.shape}")
    init_zeros(m)
    if m._data is not None:
        np.fill_diagonal(m._data, 1)


def init_random(m: Matrix, val_min, val_max, rng=None):
    """
    Fill ``m`` with values drawn uniformly from the closed range
    [val_min, val_max].

    ``rng`` is a ``numpy.random.Generator``; pass a seeded one for
    reproducible output. Defaults to :func:`default_rng`.
    """
    val_min = operator.index(val_min)
    val_max = operator.index(val_max)
    if val_min > val_max:
        raise RangeError(f"init_random: min {val_min} is greater than max {val_max}")
    if val_min < INT_MIN or val_max > INT_MAX:
        raise RangeError(f"init_random: range [{val_min}, {val_max}] does not fit in 64 bits")
    if rng is None:
        rng = default_rng()
    if m._data is not None:
        m._data[...] = rng.integers(val_min, val_max, size=m.shape, dtype=DTYPE, endpoint=True)


# ---------------------------------------------------------------------------
# Comparison

def equal(a: Matrix, b: Matrix) -> bool:
    x = _storage("equal", a)
    y = _storage("equal", b)
    if x.shape != y.shape:
        return False
    return bool(np.array_equal(x, y))


# ---------------------------------------------------------------------------
# Arithmetic

def sum(a: Matrix, b: Matrix) -> Matrix:
    x = _storage("sum", a)
    y = _storage("sum", b)
    if x.shape != y.shape:
        raise DimensionError(f"sum: dimension mismatch {x.shape} vs {y.shape}")
    return _result("sum", lambda: np.add(x, y, dtype=DTYPE))


def scalar_product(m: Matrix, scalar) -> Matrix:
    x = _storage("scalar_product", m)
    scalar = DTYPE(operator.index(scalar))
    return _result("scalar_product", lambda: np.multiply(x, scalar, dtype=DTYPE))


def negate(m: Matrix) -> Matrix:
    x = _storage("negate", m)
    return _result("negate", lambda: np.negative(x))


def transpose(m: Matrix) -> Matrix:
    x = _storage("transpose", m)
    return _result("transpose", lambda: x.T.copy(order="C"))


def product(a: Matrix, b: Matrix) -> Matrix:
    x = _storage("product", a)
    y = _storage("product", b)
    if x.shape[1] != y.shape[0]:
        raise DimensionError(f"product: inner dimensions differ {x.shape} x {y.shape}")
    return _result("product", lambda: np.matmul(x, y))
