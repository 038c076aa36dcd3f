"""Shape families and their property rules.

Each family declares, in validation order, the properties a record must
have and those it may legitimately lack.  Conversion (``profiles.base``),
the CSV loader, the storage tables and the SQL export all read from
``SCHEMAS``; nothing else encodes a family's property partition.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .properties import Prop


class ShapeFamily(Enum):
    """Structural profile categories in the AISC shapes database."""

    WIDE_FLANGE = "wide_flange"
    MISC_BEAM = "misc_beam"
    STRUCTURAL_BEAM = "structural_beam"
    H_PILE = "h_pile"
    CEE_CHANNEL = "cee_channel"
    MISC_CHANNEL = "misc_channel"
    ANGLE = "angle"
    DOUBLE_ANGLE = "double_angle"
    WIDE_FLANGE_TEE = "wide_flange_tee"
    MISC_TEE = "misc_tee"
    STRUCTURAL_TEE = "structural_tee"
    HOLLOW_STRUCTURAL_SECTION = "hollow_structural_section"
    ROUND_HOLLOW_STRUCTURAL_SECTION = "round_hollow_structural_section"
    PIPE = "pipe"


@dataclass(frozen=True)
class FamilySchema:
    """Property rule and source/storage bindings for one family."""

    family: ShapeFamily
    type_code: str  # CSV column 0
    table: str
    required: tuple[Prop, ...]
    optional: tuple[Prop, ...] = ()
    depth: Prop = Prop.D_LOWER
    width: Prop = Prop.BF
    # HSS rows share one type code; square/rect vs round is told apart by
    # the number of "X" separators in the nomenclature.
    nomenclature_x_count: int | None = None
    symbol_overrides: dict[Prop, str] = field(default_factory=dict, hash=False)

    @property
    def properties(self) -> tuple[Prop, ...]:
        return self.required + self.optional

    def symbol(self, prop: Prop) -> str:
        return self.symbol_overrides.get(prop, prop.symbol)

    def matches(self, type_code: str, nomenclature: str) -> bool:
        """True if a source row with these values belongs to this family."""
        if type_code.strip() != self.type_code:
            return False
        if self.nomenclature_x_count is None:
            return True
        return nomenclature.count("X") == self.nomenclature_x_count


# ── Property lists ────────────────────────────────────────────

_IDENTITY = (Prop.EDI_STD_NOMENCLATURE, Prop.AISC_MANUAL_LABEL)

_FLANGE_WEB = (
    Prop.W_UPPER, Prop.A_UPPER, Prop.D_LOWER, Prop.DDET, Prop.BF, Prop.BFDET,
    Prop.TW, Prop.TWDET, Prop.TWDET_2, Prop.TF, Prop.TFDET, Prop.KDES, Prop.KDET,
)

_AXES = (
    Prop.IX, Prop.ZX, Prop.SX, Prop.RX, Prop.IY, Prop.ZY, Prop.SY, Prop.RY,
)

_FIRE_PERIMETERS = (Prop.PA, Prop.PB, Prop.PC, Prop.PD)


def _without(props: tuple[Prop, ...], *excluded: Prop) -> tuple[Prop, ...]:
    return tuple(p for p in props if p not in excluded)


_WIDE_FLANGE = (
    *_IDENTITY,
    Prop.T_F,
    *_FLANGE_WEB,
    Prop.K1, Prop.BF_2TF, Prop.H_TW,
    *_AXES,
    Prop.J_UPPER, Prop.CW, Prop.WNO, Prop.SW1, Prop.QF, Prop.QW, Prop.RTS, Prop.HO,
    *_FIRE_PERIMETERS,
    Prop.T, Prop.WGI,
)

_CHANNEL = (
    *_IDENTITY,
    *_FLANGE_WEB,
    Prop.X_LOWER, Prop.EO, Prop.XP, Prop.B_T, Prop.H_TW,
    *_AXES,
    Prop.J_UPPER, Prop.CW, Prop.WNO, Prop.SW1, Prop.SW2, Prop.SW3, Prop.QF,
    Prop.QW, Prop.RO, Prop.H_UPPER, Prop.RTS, Prop.HO,
    *_FIRE_PERIMETERS,
    Prop.T,
)

_MISC_TEE = (
    *_IDENTITY,
    Prop.T_F,
    *_FLANGE_WEB,
    Prop.Y_LOWER, Prop.YP, Prop.BF_2TF, Prop.D_T,
    *_AXES,
    Prop.J_UPPER, Prop.CW, Prop.RO, Prop.H_UPPER,
)

_ANGLE = (
    *_IDENTITY,
    Prop.W_UPPER, Prop.A_UPPER, Prop.D_LOWER, Prop.B_LOWER, Prop.T_LOWER,
    Prop.KDES, Prop.KDET, Prop.X_LOWER, Prop.Y_LOWER, Prop.XP, Prop.YP, Prop.B_T,
    *_AXES,
    Prop.IZ, Prop.RZ, Prop.SZ, Prop.J_UPPER, Prop.CW, Prop.RO, Prop.TAN_A,
    Prop.IW, Prop.ZA, Prop.ZB, Prop.ZC, Prop.WA, Prop.WB, Prop.WC, Prop.SWA,
    Prop.SWC, Prop.SZA, Prop.SZB, Prop.SZC, Prop.PA, Prop.PA_2, Prop.PB,
)

_DOUBLE_ANGLE = (
    *_IDENTITY,
    Prop.W_UPPER, Prop.A_UPPER, Prop.D_LOWER, Prop.B_LOWER, Prop.T_LOWER,
    Prop.Y_LOWER, Prop.YP, Prop.B_T,
    *_AXES,
    Prop.RO, Prop.H_UPPER,
)

_HSS = (
    *_IDENTITY,
    Prop.W_UPPER, Prop.A_UPPER, Prop.HT, Prop.H, Prop.B_UPPER, Prop.B_LOWER,
    Prop.T_NOM, Prop.TDES, Prop.B_TDES, Prop.H_TDES,
    *_AXES,
    Prop.J_UPPER, Prop.C_UPPER,
)

_ROUND_HSS = (
    *_IDENTITY,
    Prop.W_UPPER, Prop.A_UPPER, Prop.OD, Prop.T_NOM, Prop.TDES, Prop.D_T,
    *_AXES,
    Prop.J_UPPER, Prop.C_UPPER,
)

_PIPE = (
    *_IDENTITY,
    Prop.W_UPPER, Prop.A_UPPER, Prop.OD, Prop.ID, Prop.T_NOM, Prop.TDES, Prop.D_T,
    *_AXES,
    Prop.J_UPPER,
)

_DIAMETER_RATIO = {Prop.D_T: "D/t"}


# ── Schema table ──────────────────────────────────────────────

SCHEMAS: dict[ShapeFamily, FamilySchema] = {
    schema.family: schema
    for schema in (
        FamilySchema(
            family=ShapeFamily.WIDE_FLANGE,
            type_code="W",
            table="wide_flanges",
            required=_WIDE_FLANGE,
            optional=(Prop.WGO,),
            symbol_overrides={Prop.RX: "Rx", Prop.ZY: "zy", Prop.SY: "sy"},
        ),
        FamilySchema(
            family=ShapeFamily.MISC_BEAM,
            type_code="M",
            table="misc_beams",
            required=_without(_WIDE_FLANGE, Prop.T_F, Prop.WGI),
            optional=(Prop.T_F, Prop.WGI),
        ),
        FamilySchema(
            family=ShapeFamily.STRUCTURAL_BEAM,
            type_code="S",
            table="structural_beams",
            required=_without(_WIDE_FLANGE, Prop.T_F, Prop.K1, Prop.WGI),
            optional=(Prop.WGI,),
        ),
        FamilySchema(
            family=ShapeFamily.H_PILE,
            type_code="HP",
            table="h_piles",
            required=_without(_WIDE_FLANGE, Prop.T_F),
        ),
        FamilySchema(
            family=ShapeFamily.CEE_CHANNEL,
            type_code="C",
            table="cee_channels",
            required=_CHANNEL,
            optional=(Prop.WGI,),
        ),
        FamilySchema(
            family=ShapeFamily.MISC_CHANNEL,
            type_code="MC",
            table="misc_channels",
            required=_CHANNEL,
            optional=(Prop.WGI,),
        ),
        FamilySchema(
            family=ShapeFamily.ANGLE,
            type_code="L",
            table="angles",
            required=_ANGLE,
            optional=(Prop.H_UPPER, Prop.SWB),
            depth=Prop.B_LOWER,
            width=Prop.D_LOWER,
        ),
        FamilySchema(
            family=ShapeFamily.DOUBLE_ANGLE,
            type_code="2L",
            table="double_angles",
            required=_DOUBLE_ANGLE,
            depth=Prop.B_LOWER,
            width=Prop.D_LOWER,
        ),
        FamilySchema(
            family=ShapeFamily.WIDE_FLANGE_TEE,
            type_code="WT",
            table="wide_flange_tees",
            required=(*_MISC_TEE, *_FIRE_PERIMETERS, Prop.WGI),
            optional=(Prop.WGO,),
        ),
        FamilySchema(
            family=ShapeFamily.MISC_TEE,
            type_code="MT",
            table="misc_tees",
            required=_MISC_TEE,
            optional=(Prop.WGI,),
        ),
        FamilySchema(
            family=ShapeFamily.STRUCTURAL_TEE,
            type_code="ST",
            table="structural_tees",
            required=_without(_MISC_TEE, Prop.T_F),
            optional=(Prop.WGI,),
        ),
        FamilySchema(
            family=ShapeFamily.HOLLOW_STRUCTURAL_SECTION,
            type_code="HSS",
            table="hollow_structural_sections",
            required=_HSS,
            depth=Prop.HT,
            width=Prop.B_UPPER,
            nomenclature_x_count=2,
        ),
        FamilySchema(
            family=ShapeFamily.ROUND_HOLLOW_STRUCTURAL_SECTION,
            type_code="HSS",
            table="round_hollow_structural_sections",
            required=_ROUND_HSS,
            depth=Prop.OD,
            width=Prop.OD,
            nomenclature_x_count=1,
            symbol_overrides=_DIAMETER_RATIO,
        ),
        FamilySchema(
            family=ShapeFamily.PIPE,
            type_code="PIPE",
            table="pipes",
            required=_PIPE,
            depth=Prop.OD,
            width=Prop.OD,
            symbol_overrides=_DIAMETER_RATIO,
        ),
    )
}
