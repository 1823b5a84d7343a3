"""Command that writes an n x n stencil matrix file."""

from __future__ import annotations

import sys
from typing import Sequence

from stencil2d.matrix import create_stencil, write_matrix


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command: make2d <file A> <size n>."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("usage: make2d <file A> <size n>")
        return 0

    file_name, size_text = args
    try:
        size = int(size_text)
    except ValueError:
        print(f"Error: invalid size {size_text!r}.", file=sys.stderr)
        return 1
    if size < 0:
        print("Can't allocate storage", file=sys.stderr)
        return 1

    matrix = create_stencil(size, size)
    try:
        write_matrix(matrix, file_name)
    except OSError:
        print("Error: Unable to open file for writing.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())