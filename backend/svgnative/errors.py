"""Conversion error taxonomy.

Raised inside pipeline stages and turned into sentinel strings at the
pipeline boundary; callers of convert() never see them.
"""

from __future__ import annotations


class ConversionError(Exception):
    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class UnsupportedInputError(ConversionError):
    """Input is not a string, is blank, or names an unknown flavor."""


class SanitizeError(ConversionError):
    pass


class ParseError(ConversionError):
    pass


class NormalizeError(ConversionError):
    pass
