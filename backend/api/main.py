"""FastAPI application: read-only access to the AISC shapes store."""

from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from aisc_shapes import (
    SCHEMAS,
    SHAPE_TYPES,
    MissingPropertyError,
    ShapeFamily,
    ShapeNotFoundError,
    ShapeRepository,
)
from aisc_shapes.config import get_settings
from aisc_shapes.logging_config import setup_logging

from .schemas import FamilyInfo, PropertyInfo, ShapeListOutput, ShapeOutput

_settings = get_settings()
setup_logging(level=_settings.log_level, json_output=_settings.log_json)
logger = logging.getLogger(__name__)

app = FastAPI(title="AISC Shapes API", version="0.1.0")


def _cors_origins() -> list[str]:
    parsed = list(get_settings().cors_origins)

    if parsed == ["*"]:
        return ["*"]

    defaults = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    return [*defaults, *parsed]


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache
def get_engine() -> Engine:
    """Engine for the configured store, created on first use."""
    return create_engine(get_settings().database_url, pool_pre_ping=True)


def _repository(family: ShapeFamily, engine: Engine) -> ShapeRepository:
    return ShapeRepository(engine, SHAPE_TYPES[family])


@app.get("/health")
def health() -> dict[str, str]:
    """Lightweight healthcheck for deployment platforms."""
    return {"status": "ok"}


# ── Families ──────────────────────────────────────────────────


@app.get("/api/families", response_model=list[FamilyInfo])
def get_families() -> list[FamilyInfo]:
    """List shape families with their property rules."""
    results: list[FamilyInfo] = []
    for family, schema in SCHEMAS.items():
        results.append(
            FamilyInfo(
                family=family.value,
                type_code=schema.type_code,
                table=schema.table,
                required=[
                    PropertyInfo(name=p.value, symbol=schema.symbol(p))
                    for p in schema.required
                ],
                optional=[
                    PropertyInfo(name=p.value, symbol=schema.symbol(p))
                    for p in schema.optional
                ],
                depth=schema.depth.value,
                width=schema.width.value,
            )
        )
    return results


# ── Shapes ────────────────────────────────────────────────────


@app.get("/api/shapes/{family}", response_model=ShapeListOutput)
def get_shapes(
    family: ShapeFamily,
    depth: float | None = None,
    width: float | None = None,
    engine: Engine = Depends(get_engine),
) -> ShapeListOutput:
    """List stored shapes of a family, optionally filtered by depth or width."""
    if depth is not None and width is not None:
        raise HTTPException(status_code=422, detail="Filter by depth or width, not both")

    repo = _repository(family, engine)
    try:
        if depth is not None:
            shapes = repo.shapes_with_depth(depth)
        elif width is not None:
            shapes = repo.shapes_with_width(width)
        else:
            shapes = repo.all()
    except MissingPropertyError as e:
        logger.error("Stored %s row is incomplete: %s", family.value, e)
        raise HTTPException(status_code=500, detail=str(e))

    return ShapeListOutput(
        family=family.value,
        count=len(shapes),
        shapes=[s.to_row() for s in shapes],
    )


@app.get("/api/shapes/{family}/nomenclature/{value}", response_model=ShapeOutput)
def get_shape_by_nomenclature(
    family: ShapeFamily,
    value: str,
    engine: Engine = Depends(get_engine),
) -> ShapeOutput:
    """Fetch one shape by its EDI standard nomenclature, e.g. ``W44X335``."""
    try:
        shape = _repository(family, engine).shape_with_edi_std_nomenclature(value)
    except ShapeNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except MissingPropertyError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return ShapeOutput(family=family.value, properties=shape.to_row())


@app.get("/api/shapes/{family}/label/{value}", response_model=ShapeOutput)
def get_shape_by_label(
    family: ShapeFamily,
    value: str,
    engine: Engine = Depends(get_engine),
) -> ShapeOutput:
    """Fetch one shape by its AISC Manual label."""
    try:
        shape = _repository(family, engine).shape_with_aisc_manual_label(value)
    except ShapeNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except MissingPropertyError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return ShapeOutput(family=family.value, properties=shape.to_row())
