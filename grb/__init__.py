"""Sparse matrices and vectors, lazy views, Matrix Market reading and GraphBLAS-style algorithms."""

__version__ = "0.1.0"