"""Render family records as standalone SQL seed scripts."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

import jinja2
from sqlalchemy.dialects import postgresql
from sqlalchemy.engine import Dialect
from sqlalchemy.schema import CreateIndex, CreateTable

from .families import ShapeFamily
from .profiles import SHAPE_TYPES, AISCShape
from .tables import TABLES

logger = logging.getLogger(__name__)

_TEMPLATE_DIR = Path(__file__).parent / "templates"


def sql_literal(value: object) -> str:
    """SQL literal for a stored property value."""
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, str):
        return "'" + value.replace("'", "''") + "'"
    if isinstance(value, (int, float)):
        return repr(float(value))
    raise TypeError(f"No SQL literal for {type(value).__name__}")


def _make_env() -> jinja2.Environment:
    """Jinja2 environment for plain-text SQL templates."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        autoescape=False,
    )
    env.filters["sql_literal"] = sql_literal
    return env


def render_sql(
    shapes: Iterable[AISCShape],
    shape_type: type[AISCShape],
    dialect: Dialect | None = None,
) -> str:
    """DDL for ``shape_type``'s table followed by one INSERT of ``shapes``.

    The DDL is compiled for ``dialect`` (PostgreSQL when omitted).
    """
    dialect = dialect or postgresql.dialect()
    table = TABLES[shape_type.family]
    quote = dialect.identifier_preparer.quote

    statements = [str(CreateTable(table).compile(dialect=dialect)).strip() + ";"]
    for index in sorted(table.indexes, key=lambda ix: [c.name for c in ix.columns]):
        statements.append(str(CreateIndex(index).compile(dialect=dialect)).strip() + ";")
    ddl = "\n\n".join(statements)

    props = shape_type.schema().properties
    rows = [[row[p.value] for p in props] for row in (s.to_row() for s in shapes)]
    insert = _make_env().get_template("insert.sql.j2").render(
        table=quote(table.name),
        columns=[quote(p.value) for p in props],
        rows=rows,
    )
    if not insert.strip():
        return ddl + "\n"
    return ddl + "\n\n" + insert


def write_sql_files(
    catalog: Mapping[ShapeFamily, list[AISCShape]],
    directory: Path | str,
    dialect: Dialect | None = None,
) -> list[Path]:
    """Write ``<table>.sql`` for every non-empty family in ``catalog``."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for family, shapes in catalog.items():
        if not shapes:
            continue
        path = directory / f"{TABLES[family].name}.sql"
        path.write_text(render_sql(shapes, SHAPE_TYPES[family], dialect), encoding="utf-8")
        logger.info(
            "Wrote %s (%d rows)",
            path,
            len(shapes),
            extra={"family": family.value, "count": len(shapes)},
        )
        written.append(path)
    return written
