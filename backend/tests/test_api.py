"""
test_api.py: HTTP endpoints over an in-memory store.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import insert

from aisc_shapes import SCHEMAS, Angle, ShapeFamily, ShapeRepository, WideFlange
from aisc_shapes.tables import TABLES
from api.main import app, get_engine


@pytest.fixture
def client(engine, w6x9_builder, sample_values, builder_from):
    ShapeRepository(engine, WideFlange).add_all([w6x9_builder.build(WideFlange)])
    ShapeRepository(engine, Angle).add_all(
        [builder_from(sample_values(ShapeFamily.ANGLE, include_optional=False)).build(Angle)]
    )
    app.dependency_overrides[get_engine] = lambda: engine
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_families(client):
    resp = client.get("/api/families")
    assert resp.status_code == 200
    data = resp.json()
    assert len(data) == len(SCHEMAS)

    wide = next(f for f in data if f["family"] == "wide_flange")
    assert wide["type_code"] == "W"
    assert wide["table"] == "wide_flanges"
    assert {"name": "rx", "symbol": "Rx"} in wide["required"]
    assert wide["optional"] == [{"name": "wgo", "symbol": "WGo"}]
    assert (wide["depth"], wide["width"]) == ("d_lower", "bf")


def test_list_shapes(client):
    resp = client.get("/api/shapes/wide_flange")
    assert resp.status_code == 200
    data = resp.json()
    assert data["family"] == "wide_flange"
    assert data["count"] == 1
    assert data["shapes"][0]["edi_std_nomenclature"] == "W6X9"
    assert data["shapes"][0]["wgo"] is None


def test_list_by_depth_and_width(client):
    assert client.get("/api/shapes/wide_flange", params={"depth": 5.9}).json()["count"] == 1
    assert client.get("/api/shapes/wide_flange", params={"width": 3.94}).json()["count"] == 1
    assert client.get("/api/shapes/wide_flange", params={"depth": 8.0}).json()["count"] == 0


def test_depth_and_width_together_rejected(client):
    resp = client.get("/api/shapes/wide_flange", params={"depth": 5.9, "width": 3.94})
    assert resp.status_code == 422


def test_empty_family(client):
    data = client.get("/api/shapes/pipe").json()
    assert data == {"family": "pipe", "count": 0, "shapes": []}


def test_unknown_family(client):
    assert client.get("/api/shapes/girder").status_code == 422


def test_by_nomenclature(client):
    resp = client.get("/api/shapes/wide_flange/nomenclature/W6X9")
    assert resp.status_code == 200
    body = resp.json()
    assert body["family"] == "wide_flange"
    assert body["properties"]["j_upper"] == 0.0405
    assert body["properties"]["t_f"] is False


def test_by_label(client):
    resp = client.get("/api/shapes/wide_flange/label/W6X9")
    assert resp.status_code == 200
    assert resp.json()["properties"]["kdes"] == 0.465


def test_angle_optional_properties_null(client):
    resp = client.get("/api/shapes/angle")
    assert resp.status_code == 200
    props = resp.json()["shapes"][0]
    assert props["h_upper"] is None
    assert props["swb"] is None


def test_not_found(client):
    resp = client.get("/api/shapes/wide_flange/label/W6X10")
    assert resp.status_code == 404


def test_incomplete_row_is_server_error(client, engine, sample_values):
    """A stored pipe row lacking OD cannot be converted."""
    table = TABLES[ShapeFamily.PIPE]
    row = {p.value: v for p, v in sample_values(ShapeFamily.PIPE).items()}
    with engine.begin() as conn:
        conn.exec_driver_sql(f"DROP TABLE {table.name}")
        conn.exec_driver_sql(
            f"CREATE TABLE {table.name} ("
            + ", ".join(f'"{c.name}"' for c in table.columns)
            + ")"
        )
        conn.execute(insert(table), [{**row, "od": None}])

    resp = client.get("/api/shapes/pipe")
    assert resp.status_code == 500
    assert resp.json()["detail"] == "The required property OD was missing."

    resp = client.get("/api/shapes/pipe/nomenclature/Pipe12STD")
    assert resp.status_code == 500
