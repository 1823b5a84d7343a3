"""Dense row-major matrices of doubles and their binary file format.

A matrix file holds two native-size 32-bit integers (rows, then columns)
followed by rows * cols IEEE-754 doubles in row-major order, all
little-endian.
"""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterator, TextIO, Union

_HEADER = struct.Struct("<ii")
_DOUBLE_SIZE = struct.calcsize("<d")

PathArg = Union[str, "PathLike[str]"]


class MatrixFormatError(ValueError):
    """Raised when matrix data cannot be decoded."""


@dataclass
class Matrix:
    """A rows x cols matrix of floats stored in row-major order."""

    rows: int
    cols: int
    values: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0:
            raise ValueError(f"invalid matrix dimensions {self.rows}x{self.cols}")
        self.values = [float(v) for v in self.values]
        if len(self.values) != self.rows * self.cols:
            raise ValueError(
                f"expected {self.rows * self.cols} values, got {len(self.values)}"
            )

    def _offset(self, key: tuple[int, int]) -> int:
        row, col = key
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"index {key} out of range for {self.rows}x{self.cols}")
        return row * self.cols + col

    def __getitem__(self, key: tuple[int, int]) -> float:
        return self.values[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self.values[self._offset(key)] = float(value)

    def rows_iter(self) -> Iterator[list[float]]:
        """Yield each row as a list."""
        for start in range(0, self.rows * self.cols, self.cols or 1):
            yield self.values[start:start + self.cols]

    def format(self) -> str:
        """Render the matrix as text, each value as a 6.2f field and a space."""
        return "".join(
            "".join(f"{value:6.2f} " for value in row) + "\n"
            for row in self.rows_iter()
        )

    def to_bytes(self) -> bytes:
        """Encode the matrix in the binary file format."""
        header = _HEADER.pack(self.rows, self.cols)
        body = struct.pack(f"<{len(self.values)}d", *self.values)
        return header + body

    @classmethod
    def from_bytes(cls, data: bytes) -> "Matrix":
        """Decode a matrix from the binary file format."""
        if len(data) < _HEADER.size:
            raise MatrixFormatError("failed to read matrix dimensions")
        rows, cols = _HEADER.unpack_from(data)
        if rows <= 0 or cols <= 0:
            raise MatrixFormatError("invalid matrix dimensions")
        count = rows * cols
        if len(data) - _HEADER.size < count * _DOUBLE_SIZE:
            raise MatrixFormatError("failed to read matrix data")
        values = struct.unpack_from(f"<{count}d", data, _HEADER.size)
        return cls(rows, cols, list(values))


def create_stencil(rows: int, cols: int) -> Matrix:
    """Build a matrix with 1.0 in the first and last columns and 0.0 elsewhere."""
    values = [
        1.0 if col in (0, cols - 1) else 0.0
        for _ in range(rows)
        for col in range(cols)
    ]
    return Matrix(rows, cols, values)


def read_matrix(path: PathArg) -> Matrix:
    """Read a matrix file."""
    with open(path, "rb") as handle:
        return Matrix.from_bytes(handle.read())


def write_matrix(matrix: Matrix, path: PathArg) -> None:
    """Write a matrix file, replacing any existing one."""
    with open(path, "wb") as handle:
        handle.write(matrix.to_bytes())


def print_matrix(matrix: Matrix, file: TextIO | None = None) -> None:
    """Print the formatted matrix to file (standard output by default)."""
    (file if file is not None else sys.stdout).write(matrix.format())