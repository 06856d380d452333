"""
圖層分派 — 依圖層類型決定輸出 Label / Image / Frame+StackLayout

每次呼叫只處理單一圖層，不遞迴子圖層；組合成完整頁面由 host 負責。
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from typing import Any

from markupsafe import Markup

from .models import Code, Context, Layer
from .projector import (
    css_record,
    frame_record,
    image_record,
    label_record,
    stack_layout_record,
)
from .renderer import render

LABEL = "label"
IMAGE = "image"
CONTAINER = "container"


def classify(layer: Layer) -> str:
    if layer.type == "text":
        return LABEL
    if layer.exportable:
        return IMAGE
    return CONTAINER


def xaml_code(code: str) -> Code:
    return Code(code=code, language="xml")


def css_code(code: str) -> Code:
    return Code(code=code, language="css")


def _container_markup(context: Context, layer: Layer) -> str:
    stack_layout = render("stack_layout.xml", stack_layout_record(context, layer))
    frame = frame_record(context, layer)
    frame["content"] = Markup(stack_layout)
    return render("frame.xml", frame)


def layer(context: Context, selected_layer: Layer) -> Code:
    """單一圖層 → XAML（text 與 container 另附 CSS 片段）."""
    kind = classify(selected_layer)
    if kind == LABEL:
        code = render("label.xml", label_record(context, selected_layer))
        code += render("style.css", css_record(selected_layer))
        return xaml_code(code)
    if kind == IMAGE:
        return xaml_code(render("image.xml", image_record(selected_layer)))

    code = _container_markup(context, selected_layer)
    code += render("style.css", css_record(selected_layer))
    return xaml_code(code)


def css(context: Context, selected_layer: Layer) -> Code:
    return css_code(render("style.css", css_record(selected_layer)))


def comment(context: Context, text: str) -> str:
    return f"<!-- {text} -->"


def _jsonable(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    return value


def debug(value: Any) -> Code:
    """除錯用：把任意值輸出成 JSON."""
    return Code(code=json.dumps(_jsonable(value), default=str, ensure_ascii=False), language="json")
