"""Spreadsheet cell values and matrices, cell-laid-out argument lists,
optional numbers, length-prefixed string helpers and process-wide registries."""

__version__ = "0.1.0"
__all__ = ["cells", "strings", "registry", "doubleornothing", "arglist"]