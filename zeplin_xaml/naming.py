"""
命名清理 — 把設計師輸入的資源 / 圖層名稱轉成 XAML key 與 CSS class
"""

import re
from typing import Optional

_WHITESPACE = re.compile(r"\s")


def sanitize_key(name: Optional[str], duplicate_suffix: Optional[str] = None) -> Optional[str]:
    """移除第一個 duplicate suffix 與所有空白，作為 x:Key 使用.

    其他不合法的識別字元不做處理（直接保留）。
    """
    if name is None:
        return None
    if duplicate_suffix:
        name = name.replace(duplicate_suffix, "", 1)
    return _WHITESPACE.sub("", name)


def sanitize_identifier(layer_name: str) -> str:
    """Hero_Image → heroImage（lowerCamelCase），供圖片來源與 CSS class 使用."""
    words = layer_name.replace("_", " ", 1).split(" ")
    camel = words[0].lower()
    for word in words[1:]:
        camel += word[:1].upper() + word[1:].lower()
    return _WHITESPACE.sub("", camel)
