"""
Domain models and value objects.

Contains the color alphabet, ColorIdentity and the parse entry points.
"""

from src.core.domain.alphabet import (
    COLOR_SYMBOLS,
    DEFAULT_ALPHABET,
    FULL,
    REGEX,
    ColorAlphabet,
    ColorIdentityString,
    is_valid,
)
from src.core.domain.cid import cid
from src.core.domain.color_identity import ColorIdentity, ColorIdentityParseError, parse

__all__ = [
    # Alphabet module
    "COLOR_SYMBOLS",
    "DEFAULT_ALPHABET",
    "FULL",
    "REGEX",
    "ColorAlphabet",
    "ColorIdentityString",
    "is_valid",
    # ColorIdentity model
    "ColorIdentity",
    "ColorIdentityParseError",
    "parse",
    "cid",
]
