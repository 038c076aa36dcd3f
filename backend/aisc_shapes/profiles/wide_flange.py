"""Doubly symmetric I-shapes: W, M, S and HP."""

from __future__ import annotations

from dataclasses import dataclass

from ..families import ShapeFamily
from .base import AISCShape


@dataclass(frozen=True)
class WideFlange(AISCShape):
    """W-shape.

    Units follow the AISC shapes database (US customary):
    - Dimensions: in.
    - Areas: in.²
    - Section moduli: in.³
    - Moments of inertia, torsional constant: in.⁴
    - Warping constant: in.⁶
    - Weight: lb/ft
    """

    family = ShapeFamily.WIDE_FLANGE

    t_f: bool          # special note in the Manual tables
    w_upper: float     # lb/ft, nominal weight
    a_upper: float     # in.², cross-sectional area
    d_lower: float     # in., overall depth
    ddet: float        # in., detailing depth
    bf: float          # in., flange width
    bfdet: float       # in., detailing flange width
    tw: float          # in., web thickness
    twdet: float       # in., detailing web thickness
    twdet_2: float     # in., detailing web thickness / 2
    tf: float          # in., flange thickness
    tfdet: float       # in., detailing flange thickness
    kdes: float        # in., flange face to web toe of fillet, design
    kdet: float        # in., flange face to web toe of fillet, detailing
    k1: float          # in., web centreline to flange toe of fillet
    bf_2tf: float      # flange slenderness
    h_tw: float        # web slenderness
    ix: float          # in.⁴
    zx: float          # in.³, plastic modulus, x-axis
    sx: float          # in.³, elastic modulus, x-axis
    rx: float          # in.
    iy: float          # in.⁴
    zy: float          # in.³
    sy: float          # in.³
    ry: float          # in.
    j_upper: float     # in.⁴, torsional constant
    cw: float          # in.⁶, warping constant
    wno: float         # in.², normalized warping function
    sw1: float         # in.⁴, warping statical moment
    qf: float          # in.³, flange statical moment
    qw: float          # in.³, web statical moment at mid-depth
    rts: float         # in., effective radius of gyration
    ho: float          # in., distance between flange centroids
    pa: float          # in., fire perimeter, all sides
    pb: float          # in., fire perimeter, top flange excluded
    pc: float          # in., box perimeter, all sides
    pd: float          # in., box perimeter, top excluded
    t: float           # in., distance between web toes of fillets
    wgi: float         # in., workable gage, inner
    wgo: float | None  # in., workable gage, outer (wide flanges only)


@dataclass(frozen=True)
class MiscBeam(AISCShape):
    """M-shape. The special note flag and inner gage are not always given."""

    family = ShapeFamily.MISC_BEAM

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
    k1: float
    bf_2tf: float
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
    qf: float
    qw: float
    rts: float
    ho: float
    pa: float
    pb: float
    pc: float
    pd: float
    t: float
    t_f: bool | None
    wgi: float | None


@dataclass(frozen=True)
class StructuralBeam(AISCShape):
    """S-shape (American Standard beam)."""

    family = ShapeFamily.STRUCTURAL_BEAM

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
    bf_2tf: float
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
    qf: float
    qw: float
    rts: float
    ho: float
    pa: float
    pb: float
    pc: float
    pd: float
    t: float
    wgi: float | None


@dataclass(frozen=True)
class HPile(AISCShape):
    """HP-shape bearing pile."""

    family = ShapeFamily.H_PILE

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
    k1: float
    bf_2tf: float
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
    qf: float
    qw: float
    rts: float
    ho: float
    pa: float
    pb: float
    pc: float
    pd: float
    t: float
    wgi: float
