"""Strict, family-specific shape records."""

from ..families import ShapeFamily
from .angle import Angle, DoubleAngle
from .base import AISCShape, convert
from .channel import CeeChannel, MiscChannel
from .hollow import HollowStructuralSection, Pipe, RoundHollowStructuralSection
from .tee import MiscTee, StructuralTee, WideFlangeTee
from .wide_flange import HPile, MiscBeam, StructuralBeam, WideFlange

SHAPE_TYPES: dict[ShapeFamily, type[AISCShape]] = {
    cls.family: cls
    for cls in (
        WideFlange,
        MiscBeam,
        StructuralBeam,
        HPile,
        CeeChannel,
        MiscChannel,
        Angle,
        DoubleAngle,
        WideFlangeTee,
        MiscTee,
        StructuralTee,
        HollowStructuralSection,
        RoundHollowStructuralSection,
        Pipe,
    )
}

__all__ = [
    "AISCShape",
    "Angle",
    "CeeChannel",
    "DoubleAngle",
    "HPile",
    "HollowStructuralSection",
    "MiscBeam",
    "MiscChannel",
    "MiscTee",
    "Pipe",
    "RoundHollowStructuralSection",
    "SHAPE_TYPES",
    "StructuralBeam",
    "StructuralTee",
    "WideFlange",
    "WideFlangeTee",
    "convert",
]
