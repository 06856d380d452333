"""
ZeplinToModel / ZeplinAPIClient / 快照 mock 測試
不需要真實 Zeplin Token，全部用假資料。
"""
from unittest.mock import MagicMock

import pytest
import requests

from zeplin_xaml.models import Color, Layer
from zeplin_xaml.zeplin_reader import (
    SNAPSHOT_FILENAME,
    ZeplinAPIClient,
    ZeplinToModel,
    build_snapshot,
    fetch_snapshot,
    find_layer,
    load_snapshot,
    save_snapshot,
    snapshot_collections,
    snapshot_layers,
)

TEXT_LAYER = {
    "id": "l2",
    "type": "text",
    "name": "Title",
    "rect": {"x": 16, "y": 24, "width": 200, "height": 32},
    "content": "Welcome",
    "opacity": 1,
    "text_styles": [{
        "range": {"location": 0, "length": 7},
        "style": {"font_family": "Roboto", "font_size": 24, "font_weight": 700,
                  "text_align": "center", "color": {"r": 0, "g": 0, "b": 0, "a": 1}},
    }],
}

GROUP_LAYER = {
    "id": "l1",
    "type": "group",
    "name": "Header",
    "rect": {"x": 0, "y": 0, "width": 375, "height": 80},
    "fills": [{"type": "color", "color": {"r": 255, "g": 255, "b": 255, "a": 1}}],
    "borders": [{"position": "inside", "thickness": 1,
                 "fill": {"type": "color", "color": {"r": 200, "g": 200, "b": 200, "a": 1}}}],
    "shadows": [{"type": "outer", "offset_x": 0, "offset_y": 2, "blur_radius": 4,
                 "color": {"r": 0, "g": 0, "b": 0, "a": 0.2}}],
    "border_radius": 4,
    "layers": [TEXT_LAYER],
}


# ─── ZeplinToModel ───────────────────────────────────────────────────────────

class TestZeplinToModel:
    def test_color(self):
        assert ZeplinToModel().color({"r": 1, "g": 2, "b": 3, "a": 0.5}) == Color(1, 2, 3, 0.5)

    def test_missing_color(self):
        assert ZeplinToModel().color(None) is None

    def test_color_resource(self):
        resource = ZeplinToModel().color_resource({"id": "c1", "name": "Red", "r": 255, "g": 0, "b": 0, "a": 1})
        assert resource.name == "Red"
        assert resource.value == Color(255, 0, 0, 1.0)

    def test_text_style(self):
        style = ZeplinToModel().text_style({
            "name": "Heading", "font_family": "Roboto", "font_size": 24,
            "font_weight": 700, "text_align": "center",
            "color": {"r": 0, "g": 0, "b": 0, "a": 1},
        })
        assert style.name == "Heading"
        assert style.font_weight == 700
        assert style.color == Color(0, 0, 0, 1.0)

    def test_text_style_defaults(self):
        style = ZeplinToModel().text_style({"font_family": "Roboto"})
        assert style.text_align == "left"
        assert style.color is None

    def test_group_layer(self):
        layer = ZeplinToModel().layer(GROUP_LAYER)
        assert layer.type == "group"
        assert layer.rect.width == 375
        assert layer.fills[0].color == Color(255, 255, 255, 1.0)
        assert layer.borders[0].thickness == 1
        assert layer.borders[0].fill.color == Color(200, 200, 200, 1.0)
        assert layer.shadows[0].blur_radius == 4
        assert layer.border_radius == 4
        assert len(layer.layers) == 1

    def test_text_layer(self):
        layer = ZeplinToModel().layer(TEXT_LAYER)
        assert layer.content == "Welcome"
        assert layer.text_styles[0].font_size == 24
        assert layer.fills == ()

    def test_find_layer_nested(self):
        layers = (ZeplinToModel().layer(GROUP_LAYER),)
        found = find_layer(layers, "Title")
        assert isinstance(found, Layer)
        assert found.type == "text"
        assert find_layer(layers, "Missing") is None


# ─── ZeplinAPIClient ─────────────────────────────────────────────────────────

def _client_with(payloads):
    client = ZeplinAPIClient("token-123")
    responses = []
    for payload in payloads:
        resp = MagicMock()
        resp.json.return_value = payload
        resp.raise_for_status.return_value = None
        responses.append(resp)
    client.session = MagicMock()
    client.session.get.side_effect = responses
    return client


def test_client_sets_bearer_token():
    client = ZeplinAPIClient("token-123")
    assert client.session.headers["Authorization"] == "Bearer token-123"


def test_client_project_colors_url():
    client = _client_with([[{"name": "Red", "r": 255, "g": 0, "b": 0, "a": 1}]])
    colors = client.get_project_colors("p1")
    assert colors[0]["name"] == "Red"
    url = client.session.get.call_args[0][0]
    assert url == "https://api.zeplin.dev/v1/projects/p1/colors"


def test_client_raises_http_error():
    client = ZeplinAPIClient("bad")
    resp = MagicMock()
    resp.raise_for_status.side_effect = requests.HTTPError("403")
    client.session = MagicMock()
    client.session.get.return_value = resp
    with pytest.raises(requests.HTTPError):
        client.get_styleguide_colors("s1")


def test_fetch_project_snapshot_with_screen():
    client = _client_with([
        [{"name": "Red", "r": 255, "g": 0, "b": 0, "a": 1}],
        [{"name": "Heading", "font_family": "Roboto", "font_size": 24}],
        {"layers": [GROUP_LAYER]},
    ])
    snapshot = fetch_snapshot(client, project_id="p1", screen_id="s9")
    assert snapshot["source"] == {"kind": "project", "id": "p1"}
    assert len(snapshot["colors"]) == 1
    assert len(snapshot["textStyles"]) == 1
    assert snapshot["layers"][0]["name"] == "Header"


def test_fetch_styleguide_snapshot():
    client = _client_with([[], []])
    snapshot = fetch_snapshot(client, styleguide_id="sg1")
    assert snapshot["source"]["kind"] == "styleguide"
    assert snapshot["layers"] == []


def test_fetch_requires_an_id():
    with pytest.raises(ValueError):
        fetch_snapshot(ZeplinAPIClient("t"))


# ─── 快照 ────────────────────────────────────────────────────────────────────

def test_snapshot_save_and_load(tmp_path):
    snapshot = build_snapshot("project", "p1", [], [], [GROUP_LAYER])
    path = save_snapshot(snapshot, str(tmp_path))
    assert path.endswith(SNAPSHOT_FILENAME)
    loaded = load_snapshot(path)
    assert loaded["layers"][0]["name"] == "Header"


def test_load_missing_snapshot(tmp_path):
    assert load_snapshot(str(tmp_path / "nope.json")) is None


def test_snapshot_collections_kind():
    project = snapshot_collections(build_snapshot("project", "p1", [], []))
    styleguide = snapshot_collections(build_snapshot("styleguide", "s1", [], []))
    assert list(project) == ["project"]
    assert list(styleguide) == ["styleguide"]


def test_snapshot_layers():
    layers = snapshot_layers(build_snapshot("project", "p1", [], [], [GROUP_LAYER]))
    assert layers[0].name == "Header"
