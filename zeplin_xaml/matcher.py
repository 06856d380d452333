"""
資源比對 — 判斷字面值是否等於某個共用顏色 / 文字樣式

只做完全相等比對（非最接近色）；比對到就輸出 {StaticResource Key}，否則輸出字面值。
"""

from typing import Optional

from .colors import to_hex_argb
from .models import Color, ColorResource, Context, ResourceCollection, TextStyle
from .naming import sanitize_key

# 沒有名稱的資源無法輸出 StaticResource，不列入比對


def find_color_reference(
    collection: Optional[ResourceCollection], color: Color
) -> Optional[ColorResource]:
    if collection is None:
        return None
    for resource in collection.colors:
        if resource.name and resource.value == color:
            return resource
    return None


def find_text_style_reference(
    collection: Optional[ResourceCollection], style: TextStyle
) -> Optional[TextStyle]:
    if collection is None:
        return None
    for resource in collection.text_styles:
        if resource.name and resource.matches(style):
            return resource
    return None


def static_resource(context: Context, name: str) -> str:
    return f"{{StaticResource {sanitize_key(name, context.options.duplicate_suffix)}}}"


def color_literal(context: Context, color: Color) -> str:
    resource = find_color_reference(context.collection, color)
    if resource:
        return static_resource(context, resource.name)
    return to_hex_argb(color)
