"""設定檔載入與基本驗證."""

import json
from pathlib import Path
from typing import Any

from .models import TEXT_ALIGNMENT_MODES, Options

DEFAULT_CONFIG_PATH = "zeplin-xaml.config.json"

# 已知有效的頂層欄位
_KNOWN_TOP_KEYS = {"zeplin", "options", "export"}

# 各區塊已知欄位（用於拼字提示）
_KNOWN_SECTION_KEYS = {
    "zeplin": {"personalAccessToken", "projectId", "styleguideId", "screenId"},
    "options": {"duplicateSuffix", "ignoreFontFamily", "textAlignmentMode", "sortResources"},
    "export": {"snapshotDir", "outputDir", "templatesDir"},
}

_BOOL_OPTIONS = ("ignoreFontFamily", "sortResources")


def _warn(msg: str) -> None:
    print(f"   ⚠️  [config] {msg}")


def validate_config(cfg: dict) -> None:
    """對 config 做基本欄位驗證，印出警告但不拋例外。"""
    if not cfg:
        return

    # 頂層未知欄位
    for key in cfg:
        if key not in _KNOWN_TOP_KEYS:
            known = ", ".join(sorted(_KNOWN_TOP_KEYS))
            _warn(f"未知頂層欄位 '{key}'（已知欄位：{known}）")

    # 各區塊欄位
    for section, known_keys in _KNOWN_SECTION_KEYS.items():
        section_cfg = cfg.get(section, {})
        if not isinstance(section_cfg, dict):
            continue
        for key in section_cfg:
            if key not in known_keys:
                known = ", ".join(sorted(known_keys))
                _warn(f"[{section}] 未知欄位 '{key}'（已知欄位：{known}）")

    options = cfg.get("options", {})
    if not isinstance(options, dict):
        return

    # options.textAlignmentMode 值驗證
    mode = options.get("textAlignmentMode")
    if mode is not None and mode not in TEXT_ALIGNMENT_MODES:
        valid = ", ".join(TEXT_ALIGNMENT_MODES)
        _warn(f"options.textAlignmentMode '{mode}' 不在已知值中（{valid}），將不輸出 HorizontalTextAlignment")

    # 布林選項類型
    for name in _BOOL_OPTIONS:
        val = options.get(name)
        if val is not None and not isinstance(val, bool):
            _warn(f"options.{name} 應為布林值，目前是 {type(val).__name__}")

    suffix = options.get("duplicateSuffix")
    if suffix is not None and not isinstance(suffix, str):
        _warn(f"options.duplicateSuffix 應為字串，目前是 {type(suffix).__name__}")


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> dict:
    """載入 JSON 設定檔，不存在則回傳空 dict；存在則做基本驗證。"""
    path = Path(config_path)
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        cfg: Any = json.load(f)
    if not isinstance(cfg, dict):
        print(f"   ⚠️  [config] '{config_path}' 格式錯誤，應為 JSON 物件，回傳空設定。")
        return {}
    validate_config(cfg)
    return cfg


def options_from_config(cfg: dict) -> Options:
    options = cfg.get("options", {})
    if not isinstance(options, dict):
        return Options()
    return Options.from_dict(options)
