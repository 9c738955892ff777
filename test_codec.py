import io

import intmat
import numpy as np
import pytest

def test_parse_simple():
    m = intmat.parse_from_text("1 2\n3 4\n")
    assert m.shape == (2, 2)
    assert m.content == [[1, 2], [3, 4]]

def test_dump_simple():
    m = intmat.from_rows([[1, 2], [3, 4]])
    assert intmat.dump_to_text(m) == "1 2 \n3 4 \n"

def test_dump_negative_values():
    m = intmat.from_rows([[-1, 0, 12]])
    assert intmat.dump_to_text(m) == "-1 0 12 \n"

def test_dump_empty():
    assert intmat.dump_to_text(intmat.Matrix()) == ""

@pytest.mark.parametrize("shape", [(1, 1), (3, 5), (6, 2)])
def test_round_trip(shape):
    m = intmat.rand(shape, -1000, 1000, rng=np.random.default_rng(7))
    assert intmat.parse_from_text(intmat.dump_to_text(m)) == m

def test_blank_lines_skipped():
    plain = "1 2 3\n4 5 6\n7 8 9\n"
    spaced = "\n\n1 2 3\n\n4 5 6\n\n\n7 8 9\n\n"
    assert intmat.parse_from_text(spaced) == intmat.parse_from_text(plain)

def test_whitespace_only_line_is_blank():
    m = intmat.parse_from_text("   \n1 2\n \t \n3 4\n")
    assert m.content == [[1, 2], [3, 4]]

def test_repeated_and_trailing_separators():
    m = intmat.parse_from_text("1   2 \n 3 4   \n")
    assert m.content == [[1, 2], [3, 4]]

def test_crlf_line_endings():
    m = intmat.parse_from_text("1 2 \r\n3 4 \r\n")
    assert m.content == [[1, 2], [3, 4]]

def test_no_trailing_newline():
    assert intmat.parse_from_text("5 6\n7 8").content == [[5, 6], [7, 8]]

def test_empty_input():
    m = intmat.parse_from_text("\n\n")
    assert m.shape == (0, 0)

def test_extra_tokens_ignored():
    m = intmat.parse_from_text("1 2\n3 4 5 6\n")
    assert m.content == [[1, 2], [3, 4]]

def test_extra_tokens_ignored_strict():
    m = intmat.parse_from_text("1 2\n3 4 junk\n", strict=True)
    assert m.content == [[1, 2], [3, 4]]

def test_short_row_zero_filled():
    m = intmat.parse_from_text("1 2 3\n4\n")
    assert m.content == [[1, 2, 3], [4, 0, 0]]

def test_short_row_strict():
    with pytest.raises(intmat.FormatError, match="line 2"):
        intmat.parse_from_text("1 2 3\n4\n", strict=True)

def test_leading_digits_rule():
    m = intmat.parse_from_text("12abc abc -3x +4 --5\n")
    assert m.content == [[12, 0, -3, 4, 0]]

def test_non_numeric_strict():
    with pytest.raises(intmat.FormatError, match="'12abc'"):
        intmat.parse_from_text("1 12abc\n", strict=True)

def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        intmat.parse_from_text("x\n", strict=True)

def test_out_of_range_token():
    with pytest.raises(intmat.FormatError):
        intmat.parse_from_text("1 99999999999999999999\n")

def test_int64_bounds_accepted():
    text = f"{2**63 - 1} {-2**63}\n"
    m = intmat.parse_from_text(text)
    assert m.content == [[2**63 - 1, -2**63]]

def test_read_write_stream():
    m = intmat.from_rows([[9, 8], [7, 6], [5, 4]])
    buf = io.StringIO()
    intmat.write(m, buf)
    buf.seek(0)
    assert intmat.read(buf) == m

def test_save_load(tmp_path):
    path = tmp_path / "m.txt"
    m = intmat.rand((4, 3), -20, 20, rng=np.random.default_rng(3))
    intmat.save(m, path)
    assert path.read_text() == intmat.dump_to_text(m)
    assert intmat.load(path) == m
    assert intmat.load(str(path)) == m

def test_save_truncates(tmp_path):
    path = tmp_path / "m.txt"
    intmat.save(intmat.full((5, 5), 1), path)
    intmat.save(intmat.full((1, 1), 2), path)
    assert path.read_text() == "2 \n"

def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        intmat.load(tmp_path / "missing.txt")

def test_save_to_directory(tmp_path):
    with pytest.raises(OSError):
        intmat.save(intmat.zeros((1, 1)), tmp_path)
