"""FlatPay exception hierarchy."""

from __future__ import annotations


class FlatPayError(Exception):
    """Base exception for all FlatPay errors."""


class StoreIOError(FlatPayError, OSError):
    """A data or ledger file could not be created, read or written."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


class ReplaceError(StoreIOError):
    """Swapping the rewritten temp file over the original failed.

    The data file is in an indeterminate state and needs manual inspection;
    ``temp_path`` still holds the fully written replacement.
    """

    def __init__(self, path: str, temp_path: str, message: str) -> None:
        self.temp_path = temp_path
        super().__init__(path, f"{message} (replacement left at {temp_path})")


class RecordParseError(FlatPayError, ValueError):
    """A row could not be interpreted (non-numeric key, wrong shape)."""

    def __init__(self, path: str, line_number: int, raw: str, message: str) -> None:
        self.path = path
        self.line_number = line_number
        self.raw = raw
        super().__init__(f"{path}:{line_number}: {message}: {raw!r}")


class FieldFormatError(FlatPayError, ValueError):
    """A field holds the delimiter or a line terminator and cannot be stored."""
