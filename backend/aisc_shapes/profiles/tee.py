"""Tees cut from W, M and S shapes."""

from __future__ import annotations

from dataclasses import dataclass

from ..families import ShapeFamily
from .base import AISCShape


@dataclass(frozen=True)
class WideFlangeTee(AISCShape):
    """WT-shape, cut from a W-shape."""

    family = ShapeFamily.WIDE_FLANGE_TEE

    t_f: bool
    w_upper: float
    a_upper: float
    d_lower: float
    ddet: float
    bf: float
    bfdet: float
    tw: float
    twdet: float
    twdet_2: float
    tf: float
    tfdet: float
    kdes: float
    kdet: float
    y_lower: float     # in., flange face to centroid
    yp: float          # in., flange face to plastic neutral axis
    bf_2tf: float
    d_t: float         # stem slenderness
    ix: float
    zx: float
    sx: float
    rx: float
    iy: float
    zy: float
    sy: float
    ry: float
    j_upper: float
    cw: float
    ro: float
    h_upper: float
    pa: float
    pb: float
    pc: float
    pd: float
    wgi: float
    wgo: float | None


@dataclass(frozen=True)
class MiscTee(AISCShape):
    """MT-shape, cut from an M-shape."""

    family = ShapeFamily.MISC_TEE

    t_f: bool
    w_upper: float
    a_upper: float
    d_lower: float
    ddet: float
    bf: float
    bfdet: float
    tw: float
    twdet: float
    twdet_2: float
    tf: float
    tfdet: float
    kdes: float
    kdet: float
    y_lower: float
    yp: float
    bf_2tf: float
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
    cw: float
    ro: float
    h_upper: float
    wgi: float | None


@dataclass(frozen=True)
class StructuralTee(AISCShape):
    """ST-shape, cut from an S-shape."""

    family = ShapeFamily.STRUCTURAL_TEE

    w_upper: float
    a_upper: float
    d_lower: float
    ddet: float
    bf: float
    bfdet: float
    tw: float
    twdet: float
    twdet_2: float
    tf: float
    tfdet: float
    kdes: float
    kdet: float
    y_lower: float
    yp: float
    bf_2tf: float
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
    cw: float
    ro: float
    h_upper: float
    wgi: float | None
