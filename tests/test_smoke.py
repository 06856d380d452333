"""
Smoke tests：驗證套件可匯入、版本與公開 API 存在。
"""


def test_import_package():
    """套件可正常匯入"""
    import zeplin_xaml
    assert zeplin_xaml.__version__ == "0.1.0"


def test_public_api():
    """公開 API 可從 zeplin_xaml 取得"""
    from zeplin_xaml import (
        comment,
        css,
        debug,
        export_styleguide_colors,
        export_styleguide_text_styles,
        layer,
        styleguide_colors,
        styleguide_text_styles,
        load_config,
    )
    for fn in (comment, css, debug, layer, styleguide_colors, styleguide_text_styles,
               export_styleguide_colors, export_styleguide_text_styles, load_config):
        assert callable(fn)


def test_comment_hook():
    from zeplin_xaml import Context, comment
    assert comment(Context(), "Header") == "<!-- Header -->"


def test_debug_serializes_dataclass():
    import json
    from zeplin_xaml import Color, debug
    result = debug(Color(1, 2, 3, 0.5))
    assert result.language == "json"
    assert json.loads(result.code) == {"r": 1, "g": 2, "b": 3, "a": 0.5}
