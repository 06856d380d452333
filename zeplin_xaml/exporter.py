"""
Resource exporter — Styleguide colors / text styles → ResourceDictionary.

Listings honour the sortResources and duplicateSuffix options. Entries that
carry the duplicate suffix are only dropped from listings; they still match
as StaticResource targets when a layer is generated.
"""

from __future__ import annotations

import textwrap
from typing import Iterable, Optional

from markupsafe import Markup

from .colors import to_hex_argb
from .emitter import xaml_code
from .models import Code, ColorResource, Context, TextStyle
from .naming import sanitize_key
from .projector import project_text_style
from .renderer import render

COLORS_FILENAME = "Colors.xaml"
TEXT_STYLES_FILENAME = "Labels.xaml"
RESOURCE_INDENT = 4


def _process(context: Context, resources: Iterable) -> list:
    options = context.options
    processed = list(resources)
    if options.sort_resources:
        processed = sorted(processed, key=lambda resource: resource.name or "")
    if options.duplicate_suffix:
        processed = [
            r for r in processed if not (r.name or "").endswith(options.duplicate_suffix)
        ]
    return processed


def color_record(context: Context, color: ColorResource) -> dict:
    return {
        "key": sanitize_key(color.name, context.options.duplicate_suffix),
        "color": to_hex_argb(color.value),
    }


def text_style_record(context: Context, text_style: TextStyle) -> dict:
    """沒有名稱的樣式不帶 x:Key，成為 Label 的隱含樣式."""
    record = {}
    key = sanitize_key(text_style.name, context.options.duplicate_suffix)
    if key:
        record["key"] = key
    record.update(project_text_style(context, text_style))
    return record


def styleguide_colors(
    context: Context, colors: Optional[Iterable[ColorResource]] = None
) -> Optional[Code]:
    if colors is None:
        if context.collection is None:
            return None
        colors = context.collection.colors
    code = render("colors.xml", {
        # 沒有名稱的顏色無法被引用，不列出
        "colors": [color_record(context, c) for c in _process(context, colors) if c.name],
    })
    return xaml_code(code)


def styleguide_text_styles(
    context: Context, text_styles: Optional[Iterable[TextStyle]] = None
) -> Optional[Code]:
    if text_styles is None:
        if context.collection is None:
            return None
        text_styles = context.collection.text_styles
    code = render("text_styles.xml", {
        "styles": [text_style_record(context, s) for s in _process(context, text_styles)],
    })
    return xaml_code(code)


def _resource_dictionary(listing: Code, filename: str) -> Code:
    resources = textwrap.indent(listing.code, " " * RESOURCE_INDENT)
    code = render("resource_dictionary.xml", {"resources": Markup(resources)})
    return Code(code=code, language="xml", filename=filename)


def export_styleguide_colors(
    context: Context, colors: Optional[Iterable[ColorResource]] = None
) -> Optional[Code]:
    listing = styleguide_colors(context, colors)
    if listing is None:
        return None
    return _resource_dictionary(listing, COLORS_FILENAME)


def export_styleguide_text_styles(
    context: Context, text_styles: Optional[Iterable[TextStyle]] = None
) -> Optional[Code]:
    listing = styleguide_text_styles(context, text_styles)
    if listing is None:
        return None
    return _resource_dictionary(listing, TEXT_STYLES_FILENAME)
