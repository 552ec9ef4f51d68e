"""
HTTP surface: settings updates, randomization and PNG export.
"""

import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from api import main as api_main
from fractree.config import CONFIG


@pytest.fixture
def client():
    api_main.CURRENT_PARAMETERS = CONFIG.default_parameters
    with TestClient(api_main.app) as test_client:
        yield test_client
    api_main.CURRENT_PARAMETERS = CONFIG.default_parameters


def test_health(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_default_tree(client):
    response = client.get("/tree", params={"width": 400, "height": 300})
    assert response.status_code == 200
    body = response.json()

    assert body["parameters"]["initial_length"] == 120.0
    assert body["origin"] == [200.0, 220.0]
    assert body["counts"] == {"strokes": 2 ** 13 - 1, "leaves": 2 ** 12}
    assert len(body["commands"]) == 2 ** 13 - 1 + 2 ** 12
    assert body["commands"][0]["frame"]["origin"] == [200.0, 220.0]


def test_settings_update_redraws_from_root(client):
    response = client.post("/tree", json={"length": 6, "curve": 15, "branch_color": "navy"})
    assert response.status_code == 200
    body = response.json()

    assert body["parameters"]["initial_length"] == 6.0
    assert body["parameters"]["curve_offset_a"] == 15.0
    assert body["parameters"]["leaf_color"] == "green"
    assert body["counts"] == {"strokes": 3, "leaves": 2}
    assert body["commands"][1]["frame"]["rotation"] == 15.0
    assert body["commands"][0]["color"] == "navy"

    # Settings persist until changed again.
    again = client.get("/tree").json()
    assert again["parameters"]["initial_length"] == 6.0


def test_random_tree_within_bounds(client):
    body = client.post("/random").json()
    params = body["parameters"]
    assert 100 <= params["initial_length"] < 120
    assert 1 <= params["initial_branch_width"] < 71
    assert 2 <= params["curve_offset_a"] < 22
    assert 0 <= params["curve_offset_b"] < 50
    assert params["branch_color"].startswith("rgb(")


def test_reset_restores_defaults(client):
    client.post("/tree", json={"length": 3})
    body = client.post("/reset").json()
    assert body["parameters"]["initial_length"] == 120.0


def test_export_png(client):
    client.post("/tree", json={"length": 40})
    response = client.get("/export.png", params={"width": 160, "height": 120})

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.headers["content-disposition"] == "attachment; filename=tree.png"
    image = Image.open(io.BytesIO(response.content))
    assert image.size == (160, 120)


def test_rejects_bad_canvas(client):
    assert client.get("/tree", params={"width": 0}).status_code == 422
    assert client.get("/export.png", params={"width": 100000, "height": 100000}).status_code == 400


@pytest.mark.parametrize(
    "payload",
    [
        '{"length": Infinity}',
        '{"length": NaN}',
        '{"length": 1e6}',
        '{"branch_width": -Infinity}',
        '{"curve": NaN}',
        '{"curve2": Infinity}',
    ],
)
def test_unbounded_settings_are_rejected(client, payload):
    before = api_main.CURRENT_PARAMETERS
    response = client.post("/tree", content=payload, headers={"Content-Type": "application/json"})

    assert response.status_code == 422
    assert api_main.CURRENT_PARAMETERS is before
    assert response.json()["detail"][0]["loc"][0] == "body"
    assert client.get("/tree", params={"width": 100, "height": 100}).status_code == 200


def test_trunk_longer_than_limit_is_rejected(client):
    response = client.post("/tree", json={"length": CONFIG.max_length + 1})
    assert response.status_code == 422
    assert api_main.CURRENT_PARAMETERS == CONFIG.default_parameters
