"""Serial 3x3 averaging stencil simulation over a matrix file."""

from __future__ import annotations

import getopt
import sys
from dataclasses import dataclass
from typing import Sequence

from stencil2d.matrix import (
    Matrix,
    MatrixFormatError,
    print_matrix,
    read_matrix,
    write_matrix,
)

_USAGE = "Usage: simulate -n <num iters> -i <in file> -o <out file> -v <debug: 0,1,2>"


class UsageError(ValueError):
    """Raised when command-line arguments are invalid."""


@dataclass(frozen=True)
class SimulationArgs:
    """Parsed command-line settings."""

    iterations: int
    input: str
    output: str
    debug: int = 0


def step(matrix: Matrix) -> Matrix:
    """Apply one sweep of the 3x3 averaging stencil and return the result.

    Interior cells are updated in row-major order, each from the current
    values of its neighbours, so earlier updates in a sweep feed later ones.
    Border cells are left unchanged. The input matrix is not modified.
    """
    result = Matrix(matrix.rows, matrix.cols, list(matrix.values))
    cols = result.cols
    values = result.values
    for i in range(1, result.rows - 1):
        for j in range(1, cols - 1):
            total = sum(
                values[r * cols + c]
                for r in (i - 1, i, i + 1)
                for c in (j - 1, j, j + 1)
            )
            values[i * cols + j] = total / 9.0
    return result


def run(matrix: Matrix, iterations: int) -> Matrix:
    """Apply the stencil the given number of times."""
    for _ in range(iterations):
        matrix = step(matrix)
    return matrix


def parse_args(argv: Sequence[str]) -> SimulationArgs:
    """Parse -n, -i, -o and -v options."""
    try:
        options, _ = getopt.gnu_getopt(list(argv), "n:i:o:v:")
    except getopt.GetoptError as exc:
        raise UsageError(str(exc)) from exc

    iterations, debug = 1, 0
    in_file: str | None = None
    out_file: str | None = None
    try:
        for flag, value in options:
            if flag == "-n":
                iterations = int(value)
            elif flag == "-i":
                in_file = value
            elif flag == "-o":
                out_file = value
            elif flag == "-v":
                debug = int(value)
    except ValueError as exc:
        raise UsageError(str(exc)) from exc

    if in_file is None or out_file is None:
        raise UsageError("Files -i and -o must be provided")
    return SimulationArgs(iterations, in_file, out_file, debug)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation command."""
    try:
        args = parse_args(sys.argv[1:] if argv is None else argv)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        print(_USAGE)
        return 1

    try:
        matrix = read_matrix(args.input)
    except OSError:
        print(f"Error: Unable to open file {args.input} for reading.", file=sys.stderr)
        return 1
    except MatrixFormatError as exc:
        print(f"Error: {exc}.", file=sys.stderr)
        return 1

    matrix = run(matrix, args.iterations)
    print_matrix(matrix)

    try:
        write_matrix(matrix, args.output)
    except OSError:
        print("Error: Unable to open file for writing.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())