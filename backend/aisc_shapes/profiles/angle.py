"""Single and double angles."""

from __future__ import annotations

from dataclasses import dataclass

from ..families import ShapeFamily
from .base import AISCShape


@dataclass(frozen=True)
class Angle(AISCShape):
    """L-shape.

    ``h_upper`` and ``swb`` are not tabulated for every angle, equal-leg
    angles in particular have no ``SwB``.
    """

    family = ShapeFamily.ANGLE

    w_upper: float         # lb/ft
    a_upper: float         # in.²
    d_lower: float         # in., shorter leg
    b_lower: float         # in., longer leg
    t_lower: float         # in., leg thickness
    kdes: float
    kdet: float
    x_lower: float         # in., heel to centroid, horizontal
    y_lower: float         # in., heel to centroid, vertical
    xp: float
    yp: float
    b_t: float
    ix: float
    zx: float
    sx: float
    rx: float
    iy: float
    zy: float
    sy: float
    ry: float
    iz: float              # in.⁴, minor principal axis
    rz: float
    sz: float
    j_upper: float
    cw: float
    ro: float
    h_upper: float | None  # flexural constant
    tan_a: float           # tangent of principal axis angle
    iw: float              # in.⁴, major principal axis
    za: float              # in., principal axis distances to points A, B, C
    zb: float
    zc: float
    wa: float
    wb: float
    wc: float
    swa: float             # in.³, elastic moduli about principal axes
    swb: float | None
    swc: float
    sza: float
    szb: float
    szc: float
    pa: float
    pa_2: float
    pb: float


@dataclass(frozen=True)
class DoubleAngle(AISCShape):
    """2L-shape, legs back to back."""

    family = ShapeFamily.DOUBLE_ANGLE

    w_upper: float
    a_upper: float
    d_lower: float
    b_lower: float
    t_lower: float
    y_lower: float
    yp: float
    b_t: float
    ix: float
    zx: float
    sx: float
    rx: float
    iy: float
    zy: float
    sy: float
    ry: float
    ro: float
    h_upper: float
