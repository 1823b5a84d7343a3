"""Command that prints a matrix file as formatted text."""

from __future__ import annotations

import sys
from typing import Sequence

from stencil2d.matrix import MatrixFormatError, print_matrix, read_matrix


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command: print2d <binary_file>."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: print2d <binary_file>", file=sys.stderr)
        return 0

    file_name = args[0]
    try:
        matrix = read_matrix(file_name)
    except OSError:
        print(f"Error: Unable to open file {file_name} for reading.", file=sys.stderr)
        return 1
    except MatrixFormatError as exc:
        print(f"Error: {exc}.", file=sys.stderr)
        return 1

    print_matrix(matrix)
    return 0


if __name__ == "__main__":
    sys.exit(main())