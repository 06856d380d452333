"""
Zeplin REST API 讀取與快照

讀取 project / styleguide 的顏色、文字樣式與畫面圖層，
轉成 models 物件，並可存成本機快照供離線產生。
"""

import json
import os
from datetime import datetime, timezone
from typing import Optional

import requests

from .models import (
    Border,
    Color,
    ColorResource,
    Fill,
    Layer,
    Rect,
    ResourceCollection,
    Shadow,
    TextStyle,
)

SNAPSHOT_VERSION = "1.0.0"
SNAPSHOT_FILENAME = "zeplin-snapshot.json"


class ZeplinAPIClient:
    """Zeplin REST API 唯讀封裝."""

    BASE_URL = "https://api.zeplin.dev/v1"

    def __init__(self, token: str):
        self.token = token
        self.session = requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        })

    def _get(self, path: str, params: Optional[dict] = None):
        resp = self.session.get(f"{self.BASE_URL}{path}", params=params or {})
        resp.raise_for_status()
        return resp.json()

    def get_project_colors(self, project_id: str) -> list:
        return self._get(f"/projects/{project_id}/colors")

    def get_project_text_styles(self, project_id: str) -> list:
        return self._get(f"/projects/{project_id}/text_styles")

    def get_styleguide_colors(self, styleguide_id: str) -> list:
        return self._get(f"/styleguides/{styleguide_id}/colors")

    def get_styleguide_text_styles(self, styleguide_id: str) -> list:
        return self._get(f"/styleguides/{styleguide_id}/text_styles")

    def get_latest_screen_version(self, project_id: str, screen_id: str) -> dict:
        return self._get(f"/projects/{project_id}/screens/{screen_id}/versions/latest")


class ZeplinToModel:
    """將 Zeplin API JSON（snake_case）轉成 models 物件."""

    def color(self, data: Optional[dict]) -> Optional[Color]:
        if not data:
            return None
        return Color(
            r=int(data.get("r", 0)),
            g=int(data.get("g", 0)),
            b=int(data.get("b", 0)),
            a=float(data.get("a", 1)),
        )

    def color_resource(self, data: dict) -> ColorResource:
        return ColorResource(name=data.get("name", ""), value=self.color(data))

    def text_style(self, data: dict) -> TextStyle:
        return TextStyle(
            font_family=data.get("font_family"),
            font_weight=int(data.get("font_weight", 400)),
            font_size=data.get("font_size", 14),
            color=self.color(data.get("color")),
            text_align=data.get("text_align") or "left",
            name=data.get("name"),
        )

    def fill(self, data: dict) -> Fill:
        return Fill(type=data.get("type", "color"), color=self.color(data.get("color")))

    def border(self, data: dict) -> Border:
        return Border(
            fill=self.fill(data.get("fill") or {}),
            thickness=data.get("thickness", 1),
            position=data.get("position", "inside"),
        )

    def shadow(self, data: dict) -> Shadow:
        return Shadow(
            type=data.get("type", "outer"),
            offset_x=data.get("offset_x", 0),
            offset_y=data.get("offset_y", 0),
            blur_radius=data.get("blur_radius", 0),
            spread=data.get("spread", 0),
            color=self.color(data.get("color")),
        )

    def layer(self, data: dict) -> Layer:
        rect = data.get("rect", {})
        # text_styles 每項為 {range, style}；只保留 style
        text_styles = tuple(
            self.text_style(item.get("style", {}))
            for item in data.get("text_styles") or []
        )
        return Layer(
            name=data.get("name", "Unnamed"),
            type=data.get("type", "shape"),
            rect=Rect(
                width=rect.get("width", 0),
                height=rect.get("height", 0),
                x=rect.get("x", 0),
                y=rect.get("y", 0),
            ),
            exportable=bool(data.get("exportable", False)),
            fills=tuple(self.fill(f) for f in data.get("fills") or []),
            borders=tuple(self.border(b) for b in data.get("borders") or []),
            shadows=tuple(self.shadow(s) for s in data.get("shadows") or []),
            opacity=data.get("opacity", 1),
            border_radius=data.get("border_radius"),
            content=data.get("content"),
            text_styles=text_styles,
            layers=tuple(self.layer(child) for child in data.get("layers") or []),
        )

    def collection(self, colors: list, text_styles: list) -> ResourceCollection:
        return ResourceCollection(
            colors=tuple(self.color_resource(c) for c in colors),
            text_styles=tuple(self.text_style(s) for s in text_styles),
        )


def find_layer(layers, name: str) -> Optional[Layer]:
    """深度優先搜尋第一個名稱相符的圖層."""
    for candidate in layers:
        if candidate.name == name:
            return candidate
        found = find_layer(candidate.layers, name)
        if found:
            return found
    return None


def build_snapshot(
    kind: str,
    source_id: str,
    colors: list,
    text_styles: list,
    layers: Optional[list] = None,
) -> dict:
    return {
        "version": SNAPSHOT_VERSION,
        "source": {"kind": kind, "id": source_id},
        "fetchedAt": datetime.now(timezone.utc).isoformat(),
        "colors": colors,
        "textStyles": text_styles,
        "layers": layers or [],
    }


def fetch_snapshot(
    client: ZeplinAPIClient,
    *,
    project_id: Optional[str] = None,
    styleguide_id: Optional[str] = None,
    screen_id: Optional[str] = None,
) -> dict:
    if project_id:
        colors = client.get_project_colors(project_id)
        text_styles = client.get_project_text_styles(project_id)
        layers = []
        if screen_id:
            layers = client.get_latest_screen_version(project_id, screen_id).get("layers", [])
        return build_snapshot("project", project_id, colors, text_styles, layers)
    if styleguide_id:
        colors = client.get_styleguide_colors(styleguide_id)
        text_styles = client.get_styleguide_text_styles(styleguide_id)
        return build_snapshot("styleguide", styleguide_id, colors, text_styles)
    raise ValueError("project_id 或 styleguide_id 至少需要一個")


def save_snapshot(snapshot: dict, output_dir: str) -> str:
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, SNAPSHOT_FILENAME)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(snapshot, f, indent=2, ensure_ascii=False)
    return path


def load_snapshot(path: str) -> Optional[dict]:
    if not os.path.exists(path):
        return None
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def snapshot_collections(snapshot: dict) -> dict:
    """快照 → {"project": collection} 或 {"styleguide": collection}，供 Context.from_host."""
    converter = ZeplinToModel()
    collection = converter.collection(
        snapshot.get("colors", []), snapshot.get("textStyles", [])
    )
    kind = snapshot.get("source", {}).get("kind", "project")
    if kind == "styleguide":
        return {"styleguide": collection}
    return {"project": collection}


def snapshot_layers(snapshot: dict) -> tuple:
    converter = ZeplinToModel()
    return tuple(converter.layer(item) for item in snapshot.get("layers", []))
