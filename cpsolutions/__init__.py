"""Contest problem solutions as Python functions, a subset-sum command and debug formatting."""

__version__ = "0.1.0"