"""
conftest.py: shared fixtures for the aisc_shapes test suite.

Sample data:
    * ``w6x9_values``: the W6X9 reference row, every WideFlange required
      property, as decoded values.
    * ``sample_values``: a factory giving a fully populated value map for any
      family.  Numbers are distinct multiples of 0.25 so they survive a text
      round trip exactly.
    * ``csv_row`` / ``write_csv``: build superset CSV rows (en dash in every
      column not given) and write them to ``tmp_path`` behind a header row.

Storage:
    ``engine`` is an in-memory SQLite engine with every family table created.
"""

import csv

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from aisc_shapes import SHAPE_TYPES, Prop, PropKind, ShapeBuilder, ShapeFamily
from aisc_shapes.catalog import CSV_LAYOUT
from aisc_shapes.cells import MISSING_SENTINEL
from aisc_shapes.tables import create_tables

# Designations whose shape matches each family's CSV discriminator.
SAMPLE_NOMENCLATURE = {
    ShapeFamily.WIDE_FLANGE: "W44X335",
    ShapeFamily.MISC_BEAM: "M12X11.8",
    ShapeFamily.STRUCTURAL_BEAM: "S24X121",
    ShapeFamily.H_PILE: "HP14X117",
    ShapeFamily.CEE_CHANNEL: "C15X50",
    ShapeFamily.MISC_CHANNEL: "MC18X58",
    ShapeFamily.ANGLE: "L8X8X1-1/8",
    ShapeFamily.DOUBLE_ANGLE: "2L8X8X1-1/8",
    ShapeFamily.WIDE_FLANGE_TEE: "WT22X167.5",
    ShapeFamily.MISC_TEE: "MT6.25X6.2",
    ShapeFamily.STRUCTURAL_TEE: "ST12X60.5",
    ShapeFamily.HOLLOW_STRUCTURAL_SECTION: "HSS6X4X1/4",
    ShapeFamily.ROUND_HOLLOW_STRUCTURAL_SECTION: "HSS6.625X0.280",
    ShapeFamily.PIPE: "Pipe12STD",
}


W6X9 = {
    Prop.EDI_STD_NOMENCLATURE: "W6X9",
    Prop.AISC_MANUAL_LABEL: "W6X9",
    Prop.T_F: False,
    Prop.W_UPPER: 9.0,
    Prop.A_UPPER: 2.68,
    Prop.D_LOWER: 5.9,
    Prop.DDET: 5.875,
    Prop.BF: 3.94,
    Prop.BFDET: 4.0,
    Prop.TW: 0.17,
    Prop.TWDET: 0.1875,
    Prop.TWDET_2: 0.125,
    Prop.TF: 0.215,
    Prop.TFDET: 0.1875,
    Prop.KDES: 0.465,
    Prop.KDET: 0.6875,
    Prop.K1: 0.5,
    Prop.BF_2TF: 9.16,
    Prop.H_TW: 29.2,
    Prop.IX: 16.4,
    Prop.ZX: 6.23,
    Prop.SX: 5.56,
    Prop.RX: 2.47,
    Prop.IY: 2.2,
    Prop.ZY: 1.72,
    Prop.SY: 1.11,
    Prop.RY: 0.905,
    Prop.J_UPPER: 0.0405,
    Prop.CW: 17.7,
    Prop.WNO: 5.6,
    Prop.SW1: 1.19,
    Prop.QF: 1.15,
    Prop.QW: 3.04,
    Prop.RTS: 1.06,
    Prop.HO: 5.69,
    Prop.PA: 22.9,
    Prop.PB: 26.8,
    Prop.PC: 15.7,
    Prop.PD: 19.7,
    Prop.T: 4.5,
    Prop.WGI: 2.25,
}

# The same row as it appears in the shapes database CSV.
W6X9_CELLS = {
    **{prop: str(value) for prop, value in W6X9.items()},
    Prop.T_F: "F",
    Prop.DDET: "5 7/8",
    Prop.BFDET: "4",
    Prop.TWDET: "3/16",
    Prop.TWDET_2: "1/8",
    Prop.TFDET: "3/16",
    Prop.KDET: "11/16",
    Prop.K1: "1/2",
    Prop.T: "4 1/2",
    Prop.WGI: "2 1/4",
}


def make_sample_values(family, include_optional=True):
    schema = SHAPE_TYPES[family].schema()
    props = schema.properties if include_optional else schema.required
    values = {}
    for index, prop in enumerate(props):
        if prop.kind is PropKind.TEXT:
            values[prop] = SAMPLE_NOMENCLATURE[family]
        elif prop.kind is PropKind.FLAG:
            values[prop] = True
        else:
            values[prop] = (index + 1) * 0.25
    return values


def make_builder(values):
    builder = ShapeBuilder()
    for prop, value in values.items():
        builder = builder.with_property(prop, value)
    return builder


def make_csv_row(type_code, cells):
    row = [type_code] + [MISSING_SENTINEL] * len(CSV_LAYOUT)
    for prop, text in cells.items():
        row[CSV_LAYOUT.index(prop) + 1] = text
    return row


def cells_from_values(values):
    cells = {}
    for prop, value in values.items():
        if prop.kind is PropKind.FLAG:
            cells[prop] = "T" if value else "F"
        else:
            cells[prop] = str(value)
    return cells


# ---------------------------------------------------------------------------
# Value fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def w6x9_values():
    return dict(W6X9)


@pytest.fixture
def w6x9_builder():
    return make_builder(W6X9)


@pytest.fixture
def sample_values():
    """Factory: ``sample_values(family, include_optional=True)``."""
    return make_sample_values


@pytest.fixture
def builder_from():
    """Factory: ``builder_from(values)`` sets every entry of a value map."""
    return make_builder


# ---------------------------------------------------------------------------
# CSV fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def csv_row():
    """Factory: ``csv_row(type_code, {Prop: text})`` → 84-cell row."""
    return make_csv_row


@pytest.fixture
def write_csv(tmp_path):
    """Factory writing rows behind a header line; returns the file path."""

    def write(rows, name="shapes.csv", encoding="utf-8-sig"):
        path = tmp_path / name
        header = ["Type"] + [prop.symbol for prop in CSV_LAYOUT]
        with open(path, "w", encoding=encoding, newline="") as f:
            writer = csv.writer(f)
            writer.writerow(header)
            writer.writerows(rows)
        return path

    return write


@pytest.fixture
def catalog_csv(write_csv):
    """A CSV with the W6X9 row and one sample row per family."""
    rows = [make_csv_row("W", W6X9_CELLS)]
    for family, shape_type in SHAPE_TYPES.items():
        values = make_sample_values(family)
        rows.append(make_csv_row(shape_type.schema().type_code, cells_from_values(values)))
    return write_csv(rows)


# ---------------------------------------------------------------------------
# Storage fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def engine():
    """In-memory SQLite with every family table."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(eng)
    yield eng
    eng.dispose()
