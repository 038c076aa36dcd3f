"""Decoding of raw text cells from the AISC shapes CSV.

Numeric cells hold plain decimals (``"0.0405"``), vulgar fractions
(``"1/2"``) or mixed numbers (``"3 1/2"``).  The database marks an
inapplicable value with an en dash, or its mis-decoded form.
"""

from __future__ import annotations

from .errors import CellDecodeError

MISSING_SENTINEL = "\u2013"  # en dash

# The en dash, and the forms it takes when its UTF-8 bytes are read as cp1252.
MISSING_SENTINELS = frozenset({MISSING_SENTINEL, "\u00e2\u20ac\u201c", "\u00e2\u20ac\u2013"})

FLAG_TRUE = "T"
FLAG_FALSE = "F"

# Sixteenths of an inch, in lowest terms.
FRACTIONS: dict[str, float] = {
    "1/16": 0.0625,
    "1/8": 0.125,
    "3/16": 0.1875,
    "1/4": 0.25,
    "5/16": 0.3125,
    "3/8": 0.375,
    "7/16": 0.4375,
    "1/2": 0.5,
    "9/16": 0.5625,
    "5/8": 0.625,
    "11/16": 0.6875,
    "3/4": 0.75,
    "13/16": 0.8125,
    "7/8": 0.875,
    "15/16": 0.9375,
}


def decode_cell(text: str) -> float | None:
    """Decode a numeric cell; ``None`` when the cell is the missing sentinel.

    Raises ``CellDecodeError`` for anything that is not a decimal, a known
    fraction or a whole number followed by a known fraction.
    """
    stripped = text.strip()
    if stripped in MISSING_SENTINELS:
        return None

    tokens = stripped.split()
    if len(tokens) == 1:
        token = tokens[0]
        if "/" in token:
            return _fraction(text, token)
        return _number(text, token)
    if len(tokens) == 2:
        whole, fraction = tokens
        return _number(text, whole) + _fraction(text, fraction)
    raise CellDecodeError(text, f"expected 1 or 2 tokens, got {len(tokens)}")


def decode_flag(text: str) -> bool | None:
    """Decode the ``T_F`` special-note flag; unknown content is absent."""
    stripped = text.strip()
    if stripped == FLAG_TRUE:
        return True
    if stripped == FLAG_FALSE:
        return False
    return None


def _number(text: str, token: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise CellDecodeError(text, f"{token!r} is not a number") from None


def _fraction(text: str, token: str) -> float:
    try:
        return FRACTIONS[token]
    except KeyError:
        raise CellDecodeError(text, f"unknown fraction {token!r}") from None
