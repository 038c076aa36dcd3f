"""Pydantic response models for the API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class PropertyInfo(BaseModel):
    name: str  # column / field name, e.g. "j_upper"
    symbol: str  # display symbol, e.g. "J"


class FamilyInfo(BaseModel):
    family: str
    type_code: str  # CSV column 0, e.g. "W"
    table: str
    required: list[PropertyInfo]
    optional: list[PropertyInfo]
    depth: str  # property matched by ?depth=
    width: str  # property matched by ?width=


class ShapeOutput(BaseModel):
    family: str
    properties: dict[str, Any]  # {property name: value}; None where not listed


class ShapeListOutput(BaseModel):
    family: str
    count: int
    shapes: list[dict[str, Any]]
