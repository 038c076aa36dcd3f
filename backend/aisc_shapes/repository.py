"""Per-family access to shapes held in a relational store."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from sqlalchemy import Table, func, select
from sqlalchemy.engine import Engine

from .builder import ShapeBuilder
from .errors import ShapeNotFoundError
from .profiles import AISCShape
from .properties import Prop
from .tables import TABLES

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=AISCShape)


def builder_from_mapping(row: Mapping[str, Any], shape_type: type[AISCShape]) -> ShapeBuilder:
    """Load the family's columns of a stored row into a fresh builder.

    Columns are matched by property name; ``NULL`` leaves the slot unset.
    """
    builder = ShapeBuilder()
    for prop in shape_type.schema().properties:
        builder = builder.with_property(prop, row[prop.value])
    return builder


class ShapeRepository(Generic[S]):
    """Read and seed one family's table.

    Every fetch converts through the family's rule, so a stored row that
    lacks a required property raises ``MissingPropertyError``.  Storage
    errors propagate as raised by SQLAlchemy.
    """

    def __init__(self, engine: Engine, shape_type: type[S]) -> None:
        self.engine = engine
        self.shape_type = shape_type
        self.table: Table = TABLES[shape_type.family]

    def __repr__(self) -> str:
        return f"ShapeRepository({self.shape_type.__name__}, table={self.table.name!r})"

    # ── Fetching ──────────────────────────────────────────────

    def all(self) -> list[S]:
        """Every stored shape of the family."""
        return self._fetch(select(self.table))

    def shape_with_edi_std_nomenclature(self, nomenclature: str) -> S:
        return self._fetch_one(Prop.EDI_STD_NOMENCLATURE, nomenclature)

    def shape_with_aisc_manual_label(self, label: str) -> S:
        return self._fetch_one(Prop.AISC_MANUAL_LABEL, label)

    def shapes_with_depth(self, depth: float) -> list[S]:
        """Shapes whose depth column equals ``depth`` exactly."""
        column = self.table.c[self.shape_type.schema().depth.value]
        return self._fetch(select(self.table).where(column == depth))

    def shapes_with_width(self, width: float) -> list[S]:
        """Shapes whose width column equals ``width`` exactly."""
        column = self.table.c[self.shape_type.schema().width.value]
        return self._fetch(select(self.table).where(column == width))

    # ── Seeding ───────────────────────────────────────────────

    def count(self) -> int:
        """Number of stored rows in the family's table."""
        with self.engine.connect() as conn:
            return conn.execute(select(func.count()).select_from(self.table)).scalar_one()

    def add_all(self, shapes: Iterable[S]) -> int:
        """Insert ``shapes`` in one transaction; returns the row count."""
        rows = [shape.to_row() for shape in shapes]
        if not rows:
            return 0
        with self.engine.begin() as conn:
            conn.execute(self.table.insert(), rows)
        logger.info(
            "Seeded %d rows into %s",
            len(rows),
            self.table.name,
            extra={"family": self.shape_type.family.value, "count": len(rows)},
        )
        return len(rows)

    # ── Internals ─────────────────────────────────────────────

    def _fetch(self, statement) -> list[S]:
        with self.engine.connect() as conn:
            rows = conn.execute(statement).mappings().all()
        logger.debug("%s: %d rows", self.table.name, len(rows))
        return [self._convert(row) for row in rows]

    def _fetch_one(self, prop: Prop, value: str) -> S:
        statement = select(self.table).where(self.table.c[prop.value] == value).limit(1)
        with self.engine.connect() as conn:
            row = conn.execute(statement).mappings().first()
        if row is None:
            raise ShapeNotFoundError(
                f"No {self.shape_type.family.value} with {prop.value} = {value!r}"
            )
        return self._convert(row)

    def _convert(self, row: Mapping[str, Any]) -> S:
        return builder_from_mapping(row, self.shape_type).build(self.shape_type)
