"""
Style projector — turns text styles and layers into flat template records.

Records use the template's camelCase keys. Optional attributes are left out
of the record entirely when they have no value, so templates can test for
key presence instead of rendering empty attributes.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional

from .colors import to_hex_argb
from .matcher import color_literal, find_text_style_reference
from .models import Context, Layer, TextStyle
from .naming import sanitize_identifier, sanitize_key

BOLD_WEIGHTS = frozenset({700, 800, 900, 950})


def font_attributes(font_weight: int) -> str:
    # XAML 只有 Bold / None，不做逐級對應
    return "Bold" if font_weight in BOLD_WEIGHTS else "None"


def round_half_up(value: float, digits: int = 2) -> float:
    # 12.125 → 12.13；內建 round 會得到 12.12
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def _alignment(style: TextStyle) -> Optional[str]:
    return style.text_align.capitalize() if style.text_align else None


def project_text_style(context: Context, style: TextStyle) -> Dict[str, Any]:
    """TextStyle → Style record（fontSize / fontAttributes / fontFamily / textColor / alignment）."""
    options = context.options
    record: Dict[str, Any] = {
        "fontSize": round_half_up(style.font_size),
        "fontAttributes": font_attributes(style.font_weight),
    }
    if not options.ignore_font_family and style.font_family:
        record["fontFamily"] = style.font_family
    if style.color is not None:
        record["textColor"] = color_literal(context, style.color)
    if options.text_alignment_mode == "style":
        alignment = _alignment(style)
        if alignment:
            record["horizontalTextAlignment"] = alignment
    return record


def label_record(context: Context, layer: Layer) -> Dict[str, Any]:
    style = layer.text_styles[0] if layer.text_styles else None
    record: Dict[str, Any] = {}
    if style is not None:
        resource = find_text_style_reference(context.collection, style)
        if resource is not None:
            record["style"] = sanitize_key(resource.name, context.options.duplicate_suffix)
        else:
            record.update(project_text_style(context, style))
    record["text"] = layer.content or ""
    if style is not None and context.options.text_alignment_mode == "label":
        alignment = _alignment(style)
        if alignment:
            record["horizontalTextAlignment"] = alignment
    return record


def image_record(layer: Layer) -> Dict[str, Any]:
    return {
        "widthRequest": layer.rect.width,
        "heightRequest": layer.rect.height,
        "source": sanitize_identifier(layer.name),
    }


def frame_record(context: Context, layer: Layer) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "widthRequest": layer.rect.width,
        "heightRequest": layer.rect.height,
        "hasShadow": bool(layer.shadows),
        "cornerRadius": layer.border_radius or 0,
    }
    if layer.fills and layer.fills[0].color is not None:
        record["backgroundColor"] = color_literal(context, layer.fills[0].color)
    if layer.borders and layer.borders[0].fill.color is not None:
        record["outlineColor"] = color_literal(context, layer.borders[0].fill.color)
    return record


def stack_layout_record(context: Context, layer: Layer) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "widthRequest": layer.rect.width,
        "heightRequest": layer.rect.height,
    }
    if layer.fills and layer.fills[0].color is not None:
        record["backgroundColor"] = color_literal(context, layer.fills[0].color)
    return record


def css_record(layer: Layer) -> Dict[str, Any]:
    """CSS 不支援 StaticResource，顏色一律輸出字面值."""
    record: Dict[str, Any] = {
        "className": sanitize_identifier(layer.name),
        "width": layer.rect.width,
        "height": layer.rect.height,
        "opacity": layer.opacity,
    }
    if layer.fills and layer.fills[0].color is not None:
        record["backgroundColor"] = to_hex_argb(layer.fills[0].color)
    if layer.borders:
        border = layer.borders[0]
        if border.fill.color is not None:
            record["borderColor"] = to_hex_argb(border.fill.color)
        record["borderWidth"] = border.thickness
    return record
