[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "stencil2d"
version = "0.1.0"
description = "Create, print and iterate 2D averaging stencil matrices stored in a small binary format"
requires-python = ">=3.10"
dependencies = []
keywords = ["stencil", "matrix", "simulation", "averaging", "numerical"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
make-2d = "stencil2d.make2d:main"
print-2d = "stencil2d.print2d:main"
stencil-2d = "stencil2d.simulate:main"

[tool.setuptools]
packages = ["stencil2d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
