"""
命名清理單元測試：x:Key 與 lowerCamelCase 識別字。
"""
from zeplin_xaml.naming import sanitize_identifier, sanitize_key


# ─── sanitize_key ───────────────────────────────────────────────────────────

def test_key_strips_suffix_and_whitespace():
    assert sanitize_key("Primary Color 2", " 2") == "PrimaryColor"


def test_key_removes_only_first_suffix_occurrence():
    assert sanitize_key("Red 2 2", " 2") == "Red2"


def test_key_without_suffix_option():
    assert sanitize_key("Dark  Gray\tText", None) == "DarkGrayText"


def test_key_none_name():
    assert sanitize_key(None, " 2") is None


def test_key_keeps_other_characters():
    # 只移除空白，其他字元原樣保留
    assert sanitize_key("Brand/Blue-500", None) == "Brand/Blue-500"


# ─── sanitize_identifier ────────────────────────────────────────────────────

def test_identifier_underscore():
    assert sanitize_identifier("Hero_Image") == "heroImage"


def test_identifier_words_lower_camel():
    assert sanitize_identifier("PRIMARY button LABEL") == "primaryButtonLabel"


def test_identifier_only_first_underscore_replaced():
    assert sanitize_identifier("icon_arrow_left") == "iconArrow_left"


def test_identifier_double_space():
    assert sanitize_identifier("Card  View") == "cardView"


def test_identifier_single_word():
    assert sanitize_identifier("Logo") == "logo"
