import io
import struct

import pytest

from stencil2d.matrix import (
    Matrix,
    MatrixFormatError,
    create_stencil,
    print_matrix,
    read_matrix,
    write_matrix,
)


def test_create_stencil_edges_are_one():
    m = create_stencil(3, 4)
    assert m.values == [1.0, 0.0, 0.0, 1.0] * 3
    assert (m.rows, m.cols) == (3, 4)


def test_getitem_and_setitem():
    m = create_stencil(2, 3)
    assert m[0, 0] == 1.0
    assert m[1, 1] == 0.0
    m[1, 1] = 5
    assert m[1, 1] == 5.0
    assert m.values[4] == 5.0


def test_index_out_of_range_on_read():
    m = create_stencil(2, 2)
    with pytest.raises(IndexError):
        _ = m[2, 0]
    assert m.values == [1.0, 1.0, 1.0, 1.0]


def test_index_out_of_range_on_write_leaves_matrix_unchanged():
    m = create_stencil(2, 2)
    with pytest.raises(IndexError):
        m[0, -1] = 7.0
    assert m.values == [1.0, 1.0, 1.0, 1.0]


def test_wrong_value_count_rejected():
    with pytest.raises(ValueError):
        Matrix(2, 2, [1.0, 2.0, 3.0])


def test_rows_iter():
    m = Matrix(2, 2, [1, 2, 3, 4])
    assert list(m.rows_iter()) == [[1.0, 2.0], [3.0, 4.0]]


def test_format_layout():
    m = Matrix(1, 2, [1, 0])
    assert m.format() == "  1.00   0.00 \n"


def test_to_bytes_header_and_size():
    m = create_stencil(2, 3)
    data = m.to_bytes()
    assert struct.unpack_from("<ii", data) == (2, 3)
    assert len(data) == 8 + 6 * 8


def test_bytes_round_trip():
    m = Matrix(2, 2, [0.5, -1.25, 3.0, 1e10])
    assert Matrix.from_bytes(m.to_bytes()) == m


def test_from_bytes_short_header():
    with pytest.raises(MatrixFormatError, match="dimensions"):
        Matrix.from_bytes(b"\x01\x00")


def test_from_bytes_invalid_dimensions():
    with pytest.raises(MatrixFormatError, match="invalid"):
        Matrix.from_bytes(struct.pack("<ii", 0, 3))


def test_from_bytes_truncated_data():
    data = create_stencil(2, 2).to_bytes()[:-1]
    with pytest.raises(MatrixFormatError, match="data"):
        Matrix.from_bytes(data)


def test_file_round_trip(tmp_path):
    path = tmp_path / "m.bin"
    m = create_stencil(4, 5)
    write_matrix(m, path)
    assert read_matrix(path) == m


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_matrix(tmp_path / "absent.bin")


def test_print_matrix_matches_format():
    m = create_stencil(3, 3)
    out = io.StringIO()
    print_matrix(m, out)
    assert out.getvalue() == m.format()
    assert out.getvalue().count("\n") == 3