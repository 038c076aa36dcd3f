"""The superset of AISC shape properties.

Every column of the AISC Shapes Database v16.0 that any shape family uses
is one ``Prop`` member.  Members are declared in the same order as the
database columns, which is also the order ``catalog.CSV_LAYOUT`` reads them.
"""

from __future__ import annotations

from enum import Enum, auto


class PropKind(Enum):
    """Value type stored in a property slot."""

    TEXT = auto()
    FLAG = auto()
    NUMBER = auto()


class Prop(Enum):
    """One named property of the superset.

    The value is the internal identifier, used as record attribute name and
    storage column name.
    """

    EDI_STD_NOMENCLATURE = "edi_std_nomenclature"
    AISC_MANUAL_LABEL = "aisc_manual_label"
    T_F = "t_f"
    W_UPPER = "w_upper"      # lb/ft, nominal weight
    A_UPPER = "a_upper"      # in.², cross-sectional area
    D_LOWER = "d_lower"      # in., overall depth (shorter leg for angles)
    DDET = "ddet"            # in., detailing depth
    HT = "ht"                # in., HSS overall depth
    H = "h"                  # in., HSS flat wall depth
    OD = "od"                # in., outside diameter
    BF = "bf"                # in., flange width
    BFDET = "bfdet"          # in., detailing flange width
    B_UPPER = "b_upper"      # in., HSS overall width
    B_LOWER = "b_lower"      # in., HSS flat wall width / longer angle leg
    ID = "id"                # in., inside diameter
    TW = "tw"                # in., web thickness
    TWDET = "twdet"          # in., detailing web thickness
    TWDET_2 = "twdet_2"      # in., detailing web thickness / 2
    TF = "tf"                # in., flange thickness
    TFDET = "tfdet"          # in., detailing flange thickness
    T_LOWER = "t_lower"      # in., angle leg thickness
    T_NOM = "t_nom"          # in., nominal wall thickness
    TDES = "tdes"            # in., design wall thickness
    KDES = "kdes"            # in., design fillet distance
    KDET = "kdet"            # in., detailing fillet distance
    K1 = "k1"                # in., web centreline to flange toe of fillet
    X_LOWER = "x_lower"      # in., horizontal distance to centroid
    Y_LOWER = "y_lower"      # in., vertical distance to centroid
    EO = "eo"                # in., shear centre offset
    XP = "xp"                # in., horizontal distance to plastic NA
    YP = "yp"                # in., vertical distance to plastic NA
    BF_2TF = "bf_2tf"
    B_T = "b_t"
    B_TDES = "b_tdes"
    H_TW = "h_tw"
    H_TDES = "h_tdes"
    D_T = "d_t"
    IX = "ix"                # in.⁴
    ZX = "zx"                # in.³
    SX = "sx"                # in.³
    RX = "rx"                # in.
    IY = "iy"                # in.⁴
    ZY = "zy"                # in.³
    SY = "sy"                # in.³
    RY = "ry"                # in.
    IZ = "iz"                # in.⁴
    RZ = "rz"                # in.
    SZ = "sz"                # in.³
    J_UPPER = "j_upper"      # in.⁴, torsional constant
    CW = "cw"                # in.⁶, warping constant
    C_UPPER = "c_upper"      # in.³, HSS torsional constant
    WNO = "wno"              # in.²
    SW1 = "sw1"              # in.⁴
    SW2 = "sw2"              # in.⁴
    SW3 = "sw3"              # in.⁴
    QF = "qf"                # in.³
    QW = "qw"                # in.³
    RO = "ro"                # in., polar radius of gyration about shear centre
    H_UPPER = "h_upper"      # flexural constant
    TAN_A = "tan_a"          # tangent of principal axis angle
    IW = "iw"                # in.⁴
    ZA = "za"                # in.
    ZB = "zb"
    ZC = "zc"
    WA = "wa"
    WB = "wb"
    WC = "wc"
    SWA = "swa"              # in.³
    SWB = "swb"
    SWC = "swc"
    SZA = "sza"              # in.³
    SZB = "szb"
    SZC = "szc"
    RTS = "rts"              # in.
    HO = "ho"                # in., distance between flange centroids
    PA = "pa"                # in., perimeters for fire design
    PA_2 = "pa_2"
    PB = "pb"
    PC = "pc"
    PD = "pd"
    T = "t"                  # in., distance between web toes of fillets
    WGI = "wgi"              # in., workable gage, inner
    WGO = "wgo"              # in., workable gage, outer

    @property
    def kind(self) -> PropKind:
        if self in _TEXT_PROPS:
            return PropKind.TEXT
        if self is Prop.T_F:
            return PropKind.FLAG
        return PropKind.NUMBER

    @property
    def symbol(self) -> str:
        """Conventional engineering symbol used in diagnostics."""
        return _SYMBOLS[self]


_TEXT_PROPS = frozenset({Prop.EDI_STD_NOMENCLATURE, Prop.AISC_MANUAL_LABEL})

# Default display names; families may override a few (see families.py).
_SYMBOLS: dict[Prop, str] = {
    Prop.EDI_STD_NOMENCLATURE: "EDI Std Nomenclature",
    Prop.AISC_MANUAL_LABEL: "AISC Manual Label",
    Prop.T_F: "T_F",
    Prop.W_UPPER: "W",
    Prop.A_UPPER: "A",
    Prop.D_LOWER: "d",
    Prop.DDET: "ddet",
    Prop.HT: "Ht",
    Prop.H: "h",
    Prop.OD: "OD",
    Prop.BF: "bf",
    Prop.BFDET: "bfdet",
    Prop.B_UPPER: "B",
    Prop.B_LOWER: "b",
    Prop.ID: "ID",
    Prop.TW: "tw",
    Prop.TWDET: "twdet",
    Prop.TWDET_2: "twdet/2",
    Prop.TF: "tf",
    Prop.TFDET: "tfdet",
    Prop.T_LOWER: "t",
    Prop.T_NOM: "tnom",
    Prop.TDES: "tdes",
    Prop.KDES: "kdes",
    Prop.KDET: "kdet",
    Prop.K1: "k1",
    Prop.X_LOWER: "x",
    Prop.Y_LOWER: "y",
    Prop.EO: "eo",
    Prop.XP: "xp",
    Prop.YP: "yp",
    Prop.BF_2TF: "bf/2tf",
    Prop.B_T: "b/t",
    Prop.B_TDES: "b/tdes",
    Prop.H_TW: "h/tw",
    Prop.H_TDES: "h/tdes",
    Prop.D_T: "d/t",
    Prop.IX: "Ix",
    Prop.ZX: "Zx",
    Prop.SX: "Sx",
    Prop.RX: "rx",
    Prop.IY: "Iy",
    Prop.ZY: "Zy",
    Prop.SY: "Sy",
    Prop.RY: "ry",
    Prop.IZ: "Iz",
    Prop.RZ: "rz",
    Prop.SZ: "Sz",
    Prop.J_UPPER: "J",
    Prop.CW: "Cw",
    Prop.C_UPPER: "C",
    Prop.WNO: "Wno",
    Prop.SW1: "Sw1",
    Prop.SW2: "Sw2",
    Prop.SW3: "Sw3",
    Prop.QF: "Qf",
    Prop.QW: "Qw",
    Prop.RO: "ro",
    Prop.H_UPPER: "H",
    Prop.TAN_A: "tan(α)",
    Prop.IW: "Iw",
    Prop.ZA: "zA",
    Prop.ZB: "zB",
    Prop.ZC: "zC",
    Prop.WA: "wA",
    Prop.WB: "wB",
    Prop.WC: "wC",
    Prop.SWA: "SwA",
    Prop.SWB: "SwB",
    Prop.SWC: "SwC",
    Prop.SZA: "SzA",
    Prop.SZB: "SzB",
    Prop.SZC: "SzC",
    Prop.RTS: "rts",
    Prop.HO: "ho",
    Prop.PA: "PA",
    Prop.PA_2: "PA2",
    Prop.PB: "PB",
    Prop.PC: "PC",
    Prop.PD: "PD",
    Prop.T: "T",
    Prop.WGI: "WGi",
    Prop.WGO: "WGo",
}
