"""Relational tables for stored shapes, one per family."""

from __future__ import annotations

import logging

from sqlalchemy import Boolean, Column, Float, MetaData, String, Table
from sqlalchemy.engine import Engine

from .families import SCHEMAS, FamilySchema, ShapeFamily
from .properties import Prop, PropKind

logger = logging.getLogger(__name__)

metadata = MetaData()


def _column(prop: Prop, nullable: bool) -> Column:
    if prop.kind is PropKind.TEXT:
        return Column(prop.value, String(64), nullable=nullable, index=True)
    if prop.kind is PropKind.FLAG:
        return Column(prop.value, Boolean, nullable=nullable)
    return Column(prop.value, Float, nullable=nullable)


def _table(schema: FamilySchema) -> Table:
    columns = [_column(p, nullable=False) for p in schema.required]
    columns += [_column(p, nullable=True) for p in schema.optional]
    return Table(schema.table, metadata, *columns)


TABLES: dict[ShapeFamily, Table] = {
    family: _table(schema) for family, schema in SCHEMAS.items()
}


def create_tables(engine: Engine) -> None:
    """Create any missing family tables."""
    metadata.create_all(engine)
    logger.info("Ensured %d shape tables on %s", len(TABLES), engine.url.render_as_string())
