"""Exceptions raised while decoding, converting and fetching shapes."""

from __future__ import annotations


class ShapeError(Exception):
    """Base class for all shape database errors."""


class MissingPropertyError(ShapeError):
    """A required property was unset when building a family record."""

    def __init__(self, property_name: str) -> None:
        self.property_name = property_name
        super().__init__(f"The required property {property_name} was missing.")


class CellDecodeError(ShapeError, ValueError):
    """A CSV cell could not be read as a number.

    The reference file is assumed to be well formed, so this aborts loading
    of the whole source.
    """

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        super().__init__(f"Cannot decode cell {text!r}: {reason}")


class ShapeNotFoundError(ShapeError, LookupError):
    """A single-shape lookup matched no stored row."""


class MalformedRowError(ShapeError, ValueError):
    """A CSV row is too short to carry every superset column."""

    def __init__(self, nomenclature: str, length: int, expected: int) -> None:
        self.nomenclature = nomenclature
        self.length = length
        super().__init__(
            f"Row {nomenclature!r} has {length} columns, expected at least {expected}"
        )
