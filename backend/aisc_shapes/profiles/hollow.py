"""Hollow structural sections and pipe."""

from __future__ import annotations

from dataclasses import dataclass

from ..families import ShapeFamily
from .base import AISCShape


@dataclass(frozen=True)
class HollowStructuralSection(AISCShape):
    """Square or rectangular HSS, e.g. ``HSS6X4X1/4``."""

    family = ShapeFamily.HOLLOW_STRUCTURAL_SECTION

    w_upper: float   # lb/ft
    a_upper: float   # in.²
    ht: float        # in., overall depth
    h: float         # in., flat width of longer wall
    b_upper: float   # in., overall width
    b_lower: float   # in., flat width of shorter wall
    t_nom: float     # in., nominal wall thickness
    tdes: float      # in., design wall thickness
    b_tdes: float
    h_tdes: float
    ix: float
    zx: float
    sx: float
    rx: float
    iy: float
    zy: float
    sy: float
    ry: float
    j_upper: float   # in.⁴
    c_upper: float   # in.³, HSS torsional constant


@dataclass(frozen=True)
class RoundHollowStructuralSection(AISCShape):
    """Round HSS, e.g. ``HSS6.625X0.280``."""

    family = ShapeFamily.ROUND_HOLLOW_STRUCTURAL_SECTION

    w_upper: float
    a_upper: float
    od: float        # in., outside diameter
    t_nom: float
    tdes: float
    d_t: float       # diameter-to-thickness ratio
    ix: float
    zx: float
    sx: float
    rx: float
    iy: float
    zy: float
    sy: float
    ry: float
    j_upper: float
    c_upper: float


@dataclass(frozen=True)
class Pipe(AISCShape):
    """Standard, extra strong and double-extra strong pipe."""

    family = ShapeFamily.PIPE

    w_upper: float
    a_upper: float
    od: float
    id: float        # in., inside diameter
    t_nom: float
    tdes: float
    d_t: float
    ix: float
    zx: float
    sx: float
    rx: float
    iy: float
    zy: float
    sy: float
    ry: float
    j_upper: float
