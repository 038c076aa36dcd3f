"""aisc_shapes: AISC steel shapes database loading, validation and storage."""

from .builder import ShapeBuilder
from .catalog import load_catalog, load_shapes, shape_from_csv_row
from .cells import decode_cell, decode_flag
from .errors import (
    CellDecodeError,
    MalformedRowError,
    MissingPropertyError,
    ShapeError,
    ShapeNotFoundError,
)
from .families import SCHEMAS, FamilySchema, ShapeFamily
from .profiles import (
    SHAPE_TYPES,
    AISCShape,
    Angle,
    CeeChannel,
    DoubleAngle,
    HollowStructuralSection,
    HPile,
    MiscBeam,
    MiscChannel,
    MiscTee,
    Pipe,
    RoundHollowStructuralSection,
    StructuralBeam,
    StructuralTee,
    WideFlange,
    WideFlangeTee,
)
from .properties import Prop, PropKind
from .repository import ShapeRepository
from .sql_export import render_sql, write_sql_files
from .tables import create_tables

__all__ = [
    "AISCShape",
    "Angle",
    "CeeChannel",
    "CellDecodeError",
    "DoubleAngle",
    "FamilySchema",
    "HPile",
    "HollowStructuralSection",
    "MalformedRowError",
    "MiscBeam",
    "MiscChannel",
    "MiscTee",
    "MissingPropertyError",
    "Pipe",
    "Prop",
    "PropKind",
    "RoundHollowStructuralSection",
    "SCHEMAS",
    "SHAPE_TYPES",
    "ShapeBuilder",
    "ShapeError",
    "ShapeFamily",
    "ShapeNotFoundError",
    "ShapeRepository",
    "StructuralBeam",
    "StructuralTee",
    "WideFlange",
    "WideFlangeTee",
    "create_tables",
    "decode_cell",
    "decode_flag",
    "load_catalog",
    "load_shapes",
    "render_sql",
    "shape_from_csv_row",
    "write_sql_files",
]
