"""
Plain-text matrix format.

One row per line, decimal values each followed by a single space::

    1 2
    3 4

There is no header: the row count is the number of non-blank lines and the
column count is the number of tokens on the first non-blank line. Blank
lines are skipped wherever they appear. Tokens past the column count are
ignored.

Parsing is permissive by default: a token is read by its leading digits
(``"12abc"`` is 12, ``"abc"`` is 0) and rows shorter than the first one are
zero-filled. With ``strict=True`` both cases raise :class:`FormatError`.
"""
import io
import logging
import re
from pathlib import Path

from .errors import FormatError
from .matrix import INT_MAX, INT_MIN, Matrix, allocate

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"[+-]?[0-9]+")


def _parse_token(token: str, lineno: int, strict: bool) -> int:
    if strict:
        match = _LEADING_INT.fullmatch(token)
        if match is None:
            raise FormatError(f"parse: line {lineno}: {token!r} is not an integer")
    else:
        match = _LEADING_INT.match(token)
        if match is None:
            return 0
    value = int(match.group())
    if not INT_MIN <= value <= INT_MAX:
        raise FormatError(f"parse: line {lineno}: {value} does not fit in 64 bits")
    return value


def _data_lines(text: str):
    for lineno, line in enumerate(text.split("\n"), start=1):
        tokens = line.split()
        if tokens:
            yield lineno, tokens


def parse_from_text(text: str, strict: bool = False) -> Matrix:
    rows = 0
    columns = 0
    for _, tokens in _data_lines(text):
        if rows == 0:
            columns = len(tokens)
        rows += 1

    m = allocate(rows, columns)

    for row, (lineno, tokens) in enumerate(_data_lines(text)):
        if len(tokens) < columns:
            if strict:
                m.release()
                raise FormatError(f"parse: line {lineno}: expected {columns} values, got {len(tokens)}")
            logger.debug("line %d: %d of %d values, zero-filling", lineno, len(tokens), columns)
        elif len(tokens) > columns:
            logger.debug("line %d: ignoring %d extra values", lineno, len(tokens) - columns)
        try:
            values = [_parse_token(t, lineno, strict) for t in tokens[:columns]]
        except FormatError:
            m.release()
            raise
        m._data[row, : len(values)] = values

    return m


def read(stream, strict: bool = False) -> Matrix:
    return parse_from_text(stream.read(), strict=strict)


def write(m: Matrix, stream):
    for row in m.content:
        stream.write("".join(f"{v} " for v in row))
        stream.write("\n")


def dump_to_text(m: Matrix) -> str:
    buf = io.StringIO()
    write(m, buf)
    return buf.getvalue()


def load(path, strict: bool = False) -> Matrix:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        m = read(f, strict=strict)
    logger.debug("loaded %dx%d matrix from %s", m.rows, m.columns, p)
    return m


def save(m: Matrix, path):
    p = Path(path)
    with p.open("w", encoding="utf-8") as f:
        write(m, f)
    logger.debug("saved %dx%d matrix to %s", m.rows, m.columns, p)
