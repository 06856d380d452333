"""
zeplin-xaml — Zeplin 設計稿 → Xamarin.Forms XAML / CSS

把圖層轉成 Label / Image / Frame 標記，把共用顏色與文字樣式匯出成 ResourceDictionary。
"""

__version__ = "0.1.0"

from .models import (
    Border,
    Code,
    Color,
    ColorResource,
    Context,
    Fill,
    Layer,
    Options,
    Rect,
    ResourceCollection,
    ResourceContainer,
    Shadow,
    TextStyle,
)
from .naming import sanitize_identifier, sanitize_key
from .colors import to_hex_argb
from .matcher import find_color_reference, find_text_style_reference
from .emitter import comment, css, debug, layer
from .exporter import (
    export_styleguide_colors,
    export_styleguide_text_styles,
    styleguide_colors,
    styleguide_text_styles,
)
from .zeplin_reader import ZeplinAPIClient, ZeplinToModel
from .config import load_config, validate_config

__all__ = [
    "__version__",
    "Border",
    "Code",
    "Color",
    "ColorResource",
    "Context",
    "Fill",
    "Layer",
    "Options",
    "Rect",
    "ResourceCollection",
    "ResourceContainer",
    "Shadow",
    "TextStyle",
    "sanitize_identifier",
    "sanitize_key",
    "to_hex_argb",
    "find_color_reference",
    "find_text_style_reference",
    "comment",
    "css",
    "debug",
    "layer",
    "export_styleguide_colors",
    "export_styleguide_text_styles",
    "styleguide_colors",
    "styleguide_text_styles",
    "ZeplinAPIClient",
    "ZeplinToModel",
    "load_config",
    "validate_config",
]
