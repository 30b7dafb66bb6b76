"""Classic algorithms and puzzle solutions as plain Python functions."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "freq_stack",
    "numeric",
    "searching",
    "sorting",
    "text",
    "tree_diameter",
    "trees",
]