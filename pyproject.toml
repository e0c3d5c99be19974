[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grb"
version = "0.1.0"
description = "Sparse matrices, vectors, views and GraphBLAS-style algorithms in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphblas", "sparse", "matrix", "csr", "linear algebra", "matrix market"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["grb"]

[tool.pytest.ini_options]
addopts = "-ra"
