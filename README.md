# stencil2d

Tools for building a 2D stencil matrix, printing it and running a 3×3 averaging
stencil over it.

## Matrix file format

A matrix file is little-endian throughout:

- two 32-bit signed integers: the row count, then the column count
- `rows × cols` 64-bit IEEE-754 doubles in row-major order

A file whose header is short, whose dimensions are not both positive, or whose
data is shorter than the header promises is rejected.

## Installation

```
pip install .
```

## Command-line tools

Create an `n × n` stencil matrix. The first and last columns are 1.0 and every
other cell is 0.0:

```
make-2d initial.dat 10
```

With the wrong number of arguments it prints a usage line and exits with
status 0. A size that is not an integer, a negative size, or an output file
that cannot be opened gives an error message and status 1.

Print a stored matrix. Each value is written as a six-character field with two
decimals followed by a space, one row per line:

```
print-2d initial.dat
```

Run the averaging stencil:

```
stencil-2d -n 100 -i initial.dat -o final.dat
```

- `-n` sets the number of iterations (default 1).
- `-i` and `-o` name the input and output files; both are required.
- `-v` takes an integer debug level; it is parsed but does not change the
  output.

Each iteration sweeps the interior cells in row-major order, replacing each
with the mean of its 3×3 neighbourhood. The sweep works in place, so cells
already updated in a sweep feed the cells after them. Border cells keep their
values. The final matrix is printed and then written to the output file.
Missing or invalid options print the reason and a usage line and exit with
status 1; so do unreadable or malformed input files and unwritable output
files.

## Library use

```python
from stencil2d.matrix import create_stencil, read_matrix, write_matrix, print_matrix
from stencil2d.simulate import run, step

grid = create_stencil(8, 8)
result = run(grid, 50)          # the same as applying step() 50 times
write_matrix(result, "result.dat")
print_matrix(read_matrix("result.dat"))
```

`Matrix` holds `rows`, `cols` and a flat row-major `values` list. It supports
`matrix[i, j]` reading and assignment (out-of-range indices raise
`IndexError`), iteration over its rows with `rows_iter()`, text rendering with
`format()`, and conversion to and from the file format with `to_bytes()` and
`Matrix.from_bytes()`. Malformed data raises `MatrixFormatError`, a subclass of
`ValueError`. `step()` and `run()` return new matrices and leave their input
unchanged.

`stencil2d.simulate.parse_args()` turns a list of command-line arguments into a
`SimulationArgs` value and raises `UsageError` when they are invalid.

## What this package does not do

The stencil runs in a single thread only; there is no multi-threaded,
multi-process or distributed runner, and no option for choosing a number of
workers. The debug level given with `-v` produces no extra output.

## Running the tests

```
pip install ".[test]"
pytest
```