"""
資料模型 — Zeplin 圖層與共用資源（顏色 / 文字樣式）

所有模型都是唯讀快照：由 host（Zeplin API 或快照檔）提供，產生器只讀不寫。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

TEXT_ALIGNMENT_MODES = ("style", "label")


@dataclass(frozen=True)
class Color:
    """RGBA 顏色，r/g/b 為 0-255，a 為 0.0-1.0."""
    r: int
    g: int
    b: int
    a: float = 1.0

    def to_hex(self) -> dict:
        return {
            "r": f"{self.r:02x}",
            "g": f"{self.g:02x}",
            "b": f"{self.b:02x}",
        }


@dataclass(frozen=True)
class ColorResource:
    name: str
    value: Color


@dataclass(frozen=True)
class TextStyle:
    """文字樣式；name 只有在它是共用資源時才有值."""
    font_family: Optional[str] = None
    font_weight: int = 400
    font_size: float = 14
    color: Optional[Color] = None
    text_align: str = "left"
    name: Optional[str] = None

    def matches(self, other: "TextStyle") -> bool:
        """精確比對（不比 name），用來判斷是否可改用 StaticResource."""
        return (
            self.font_family == other.font_family
            and self.font_weight == other.font_weight
            and self.font_size == other.font_size
            and self.color == other.color
            and self.text_align == other.text_align
        )


@dataclass(frozen=True)
class Fill:
    type: str = "color"
    color: Optional[Color] = None


@dataclass(frozen=True)
class Border:
    fill: Fill = field(default_factory=Fill)
    thickness: float = 1
    position: str = "inside"


@dataclass(frozen=True)
class Shadow:
    type: str = "outer"
    offset_x: float = 0
    offset_y: float = 0
    blur_radius: float = 0
    spread: float = 0
    color: Optional[Color] = None


@dataclass(frozen=True)
class Rect:
    width: float = 0
    height: float = 0
    x: float = 0
    y: float = 0


@dataclass(frozen=True)
class Layer:
    """設計稿中的單一節點（text / shape / group）."""
    name: str
    type: str = "shape"
    rect: Rect = field(default_factory=Rect)
    exportable: bool = False
    fills: Tuple[Fill, ...] = ()
    borders: Tuple[Border, ...] = ()
    shadows: Tuple[Shadow, ...] = ()
    opacity: float = 1
    border_radius: Optional[float] = None
    content: Optional[str] = None
    text_styles: Tuple[TextStyle, ...] = ()
    layers: Tuple["Layer", ...] = ()


@dataclass(frozen=True)
class ResourceCollection:
    colors: Tuple[ColorResource, ...] = ()
    text_styles: Tuple[TextStyle, ...] = ()


@dataclass(frozen=True)
class ResourceContainer:
    """Project 或 Styleguide 的資源集合，kind 為明確的判別欄位."""
    kind: str
    collection: ResourceCollection


@dataclass(frozen=True)
class Options:
    duplicate_suffix: Optional[str] = None
    ignore_font_family: bool = False
    text_alignment_mode: Optional[str] = "style"
    sort_resources: bool = False

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "Options":
        """由 camelCase 設定（duplicateSuffix 等）建立 Options."""
        data = data or {}
        return cls(
            duplicate_suffix=data.get("duplicateSuffix") or None,
            ignore_font_family=bool(data.get("ignoreFontFamily", False)),
            text_alignment_mode=data.get("textAlignmentMode", "style"),
            sort_resources=bool(data.get("sortResources", False)),
        )


@dataclass(frozen=True)
class Context:
    """單次產生呼叫的唯讀環境：設定 + 目前可用的資源集合."""
    options: Options = field(default_factory=Options)
    container: Optional[ResourceContainer] = None

    @classmethod
    def from_host(
        cls,
        options: Optional[Options] = None,
        *,
        project: Optional[ResourceCollection] = None,
        styleguide: Optional[ResourceCollection] = None,
    ) -> "Context":
        # host 可能只開 project 或只開 styleguide；project 優先
        container = None
        if project is not None:
            container = ResourceContainer("project", project)
        elif styleguide is not None:
            container = ResourceContainer("styleguide", styleguide)
        return cls(options=options or Options(), container=container)

    @property
    def collection(self) -> Optional[ResourceCollection]:
        return self.container.collection if self.container else None


@dataclass(frozen=True)
class Code:
    """回給 host 的產出：程式碼 + 語言，export 類另帶檔名."""
    code: str
    language: str
    filename: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"code": self.code, "language": self.language}
        if self.filename:
            result["filename"] = self.filename
        return result
