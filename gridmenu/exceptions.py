"""Custom exceptions for menu operations.

This module defines the exceptions raised by the option store and the menu
facade so callers can tell programmer errors apart from routine boundary
cases (which are silent no-ops and never raise).

Exception Hierarchy:
    MenuError (base)
        ├── IndexOutOfRangeError (also an IndexError)
        └── InvalidOperationError

Errors raised by caller-supplied callbacks are not part of this hierarchy:
they propagate out of ``trigger`` and the input loop unchanged.

Usage:
    from gridmenu.exceptions import IndexOutOfRangeError

    if index >= len(options):
        raise IndexOutOfRangeError(index, len(options))
"""

from typing import Optional


class MenuError(Exception):
    """Base exception for all menu operations."""


class IndexOutOfRangeError(MenuError, IndexError):
    """An index-addressed option mutation was beyond the current count."""

    def __init__(self, index: int, count: int, operation: str = ""):
        self.index = index
        self.count = count
        self.operation = operation
        msg = f"Option index {index} out of range for {count} option(s)"
        if operation:
            msg = f"{operation}: {msg}"
        super().__init__(msg)


class InvalidOperationError(MenuError):
    """The requested operation does not apply to the addressed option."""

    def __init__(self, message: str, index: Optional[int] = None):
        self.index = index
        super().__init__(message)
