"""Classic sorting, array, backtracking and graph algorithms."""

__version__ = "0.1.0"
__all__ = ["arrays", "backtracking", "graphs", "sorting"]