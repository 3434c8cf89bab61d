"""Exception types raised by megadrile.

Low-level failures (``OSError`` from gzip, ``ValueError`` from vcfpy and so
on) are translated into these at the stream boundary, with the original
exception chained as ``__cause__``.
"""

from __future__ import annotations

from typing import Optional

__all__ = ["MegadrileError", "VcfOpenError", "RecordReadError"]


class MegadrileError(Exception):
    """Base class for all megadrile errors."""


class VcfOpenError(MegadrileError):
    """The input could not be opened, decompressed or its header parsed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot open VCF '{path}': {reason}")
        self.path = path
        self.reason = reason


class RecordReadError(MegadrileError):
    """A data line after the header failed to decode or parse.

    ``record_index`` is the 1-based position of the failing record.
    """

    def __init__(self, path: str, record_index: int, reason: str):
        super().__init__(f"failed to read record {record_index} of '{path}': {reason}")
        self.path = path
        self.record_index = record_index
        self.reason = reason


def describe(err: Optional[BaseException]) -> str:
    """Return ``'<Type>: message'`` for an exception, or an empty string."""
    if err is None:
        return ""
    msg = str(err)
    return f"{type(err).__name__}: {msg}" if msg else type(err).__name__
