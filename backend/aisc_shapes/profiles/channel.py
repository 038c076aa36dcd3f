"""Channels: C and MC."""

from __future__ import annotations

from dataclasses import dataclass

from ..families import ShapeFamily
from .base import AISCShape


@dataclass(frozen=True)
class _Channel(AISCShape):
    w_upper: float     # lb/ft
    a_upper: float     # in.²
    d_lower: float     # in.
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
    x_lower: float     # in., back of web to centroid
    eo: float          # in., shear centre offset from web
    xp: float          # in., back of web to plastic neutral axis
    b_t: float
    h_tw: float
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
    wno: float
    sw1: float
    sw2: float
    sw3: float
    qf: float
    qw: float
    ro: float          # in., polar radius of gyration about shear centre
    h_upper: float     # flexural constant
    rts: float
    ho: float
    pa: float
    pb: float
    pc: float
    pd: float
    t: float
    wgi: float | None  # in., not listed for the smallest channels


@dataclass(frozen=True)
class CeeChannel(_Channel):
    """C-shape (American Standard channel)."""

    family = ShapeFamily.CEE_CHANNEL


@dataclass(frozen=True)
class MiscChannel(_Channel):
    """MC-shape (miscellaneous channel)."""

    family = ShapeFamily.MISC_CHANNEL
