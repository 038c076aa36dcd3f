"""Loads family records from the AISC shapes database CSV.

The CSV carries every superset column on every row; column 0 is the type
code and columns 1–83 follow ``CSV_LAYOUT``.  Only the columns a family
uses are decoded for that family.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TypeVar

from .builder import ShapeBuilder
from .cells import decode_cell, decode_flag
from .errors import MalformedRowError
from .families import ShapeFamily
from .profiles import SHAPE_TYPES, AISCShape
from .properties import Prop, PropKind

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=AISCShape)

TYPE_INDEX = 0

# Superset columns in file order, starting at column 1.
CSV_LAYOUT: tuple[Prop, ...] = tuple(Prop)

CSV_COLUMN: dict[Prop, int] = {
    prop: index for index, prop in enumerate(CSV_LAYOUT, start=TYPE_INDEX + 1)
}

ROW_LENGTH = len(CSV_LAYOUT) + 1


def read_rows(path: Path | str, encoding: str = "utf-8-sig") -> list[list[str]]:
    """Read all data rows of the CSV, skipping the header row."""
    with open(path, encoding=encoding, newline="") as f:
        reader = csv.reader(f)
        next(reader, None)
        return [row for row in reader if row]


def _check_length(row: Sequence[str]) -> None:
    if len(row) < ROW_LENGTH:
        nomenclature = row[CSV_COLUMN[Prop.EDI_STD_NOMENCLATURE]] if len(row) > 1 else ""
        raise MalformedRowError(nomenclature.strip(), len(row), ROW_LENGTH)


def belongs_to(row: Sequence[str], shape_type: type[AISCShape]) -> bool:
    """True if ``row``'s discriminator selects ``shape_type``'s family."""
    _check_length(row)
    nomenclature = row[CSV_COLUMN[Prop.EDI_STD_NOMENCLATURE]]
    return shape_type.schema().matches(row[TYPE_INDEX], nomenclature)


def builder_from_csv_row(row: Sequence[str], shape_type: type[AISCShape]) -> ShapeBuilder:
    """Decode the columns ``shape_type`` uses into a fresh builder.

    Raises ``MalformedRowError`` for a row of the wrong length and
    ``CellDecodeError`` for a malformed numeric cell.
    """
    _check_length(row)
    builder = ShapeBuilder()
    for prop in shape_type.schema().properties:
        cell = row[CSV_COLUMN[prop]]
        if prop.kind is PropKind.TEXT:
            value = cell.strip()
        elif prop.kind is PropKind.FLAG:
            value = decode_flag(cell)
        else:
            value = decode_cell(cell)
        builder = builder.with_property(prop, value)
    return builder


def shape_from_csv_row(row: Sequence[str], shape_type: type[S]) -> S:
    """Convert one CSV row into a ``shape_type`` record."""
    return builder_from_csv_row(row, shape_type).build(shape_type)


def shapes_from_rows(rows: Iterable[Sequence[str]], shape_type: type[S]) -> list[S]:
    """Convert every row belonging to ``shape_type``'s family.

    The first decode or conversion error aborts the whole batch; the
    reference file is expected to be clean.
    """
    return [
        shape_from_csv_row(row, shape_type)
        for row in rows
        if belongs_to(row, shape_type)
    ]


def load_shapes(
    path: Path | str,
    shape_type: type[S],
    encoding: str = "utf-8-sig",
) -> list[S]:
    """Load all shapes of one family from the CSV at ``path``."""
    shapes = shapes_from_rows(read_rows(path, encoding), shape_type)
    logger.info(
        "Loaded %d %s shapes",
        len(shapes),
        shape_type.family.value,
        extra={"family": shape_type.family.value, "count": len(shapes)},
    )
    return shapes


def load_catalog(
    path: Path | str,
    encoding: str = "utf-8-sig",
) -> dict[ShapeFamily, list[AISCShape]]:
    """Load every family from the CSV at ``path``, reading the file once."""
    rows = read_rows(path, encoding)
    catalog: dict[ShapeFamily, list[AISCShape]] = {}
    for family, shape_type in SHAPE_TYPES.items():
        shapes = shapes_from_rows(rows, shape_type)
        logger.info(
            "Loaded %d %s shapes",
            len(shapes),
            family.value,
            extra={"family": family.value, "count": len(shapes)},
        )
        catalog[family] = shapes
    return catalog
