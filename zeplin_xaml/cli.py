#!/usr/bin/env python3
"""
zeplin-xaml CLI — Zeplin → Xamarin.Forms XAML

  python -m zeplin_xaml.cli pull --project-id ID [--screen-id ID]   # 抓取快照
  python -m zeplin_xaml.cli export [--output ./Styles]              # Colors.xaml / Labels.xaml
  python -m zeplin_xaml.cli colors | text-styles                    # 印出資源清單
  python -m zeplin_xaml.cli layer NAME | css NAME                   # 單一圖層
  python -m zeplin_xaml.cli preview                                 # 預覽圖層樹
  python -m zeplin_xaml.cli watch                                   # 快照變更時自動 export
"""

import argparse
import dataclasses
import os
import sys
import time
from pathlib import Path
from typing import Optional

import requests
from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from zeplin_xaml import __version__

from .config import DEFAULT_CONFIG_PATH, load_config, options_from_config
from .emitter import classify, css, layer
from .exporter import (
    export_styleguide_colors,
    export_styleguide_text_styles,
    styleguide_colors,
    styleguide_text_styles,
)
from .models import Context, Options
from .renderer import configure_project_templates
from .zeplin_reader import (
    SNAPSHOT_FILENAME,
    ZeplinAPIClient,
    fetch_snapshot,
    find_layer,
    load_snapshot,
    save_snapshot,
    snapshot_collections,
    snapshot_layers,
)


def _snapshot_dir(config: dict) -> str:
    return config.get("export", {}).get("snapshotDir", ".zeplin-xaml")


def _snapshot_path(args, config: dict) -> str:
    return getattr(args, "snapshot", None) or os.path.join(_snapshot_dir(config), SNAPSHOT_FILENAME)


def _options(args, config: dict) -> Options:
    """config 的 options，再以命令列參數覆寫."""
    options = options_from_config(config)
    overrides = {}
    if getattr(args, "duplicate_suffix", None) is not None:
        overrides["duplicate_suffix"] = args.duplicate_suffix or None
    if getattr(args, "sort", False):
        overrides["sort_resources"] = True
    if getattr(args, "ignore_font_family", False):
        overrides["ignore_font_family"] = True
    if getattr(args, "alignment", None):
        overrides["text_alignment_mode"] = args.alignment
    return dataclasses.replace(options, **overrides) if overrides else options


def _configure_templates(config: dict) -> None:
    templates_dir = config.get("export", {}).get("templatesDir")
    if templates_dir:
        configure_project_templates(Path(templates_dir))


def _load(args, config: dict):
    """讀取快照並建立 Context；失敗回傳 (None, None)."""
    path = _snapshot_path(args, config)
    snapshot = load_snapshot(path)
    if snapshot is None:
        print(f"❌ 找不到快照 '{path}'，請先執行 'zeplin-xaml pull'。")
        return None, None
    context = Context.from_host(_options(args, config), **snapshot_collections(snapshot))
    return context, snapshot


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def cmd_pull(args, config: dict) -> int:
    """Pull: 從 Zeplin API 抓取顏色 / 文字樣式 / 圖層並存成快照."""
    zeplin_cfg = config.get("zeplin", {})
    token = zeplin_cfg.get("personalAccessToken") or os.environ.get("ZEPLIN_TOKEN")
    project_id = args.project_id or zeplin_cfg.get("projectId")
    styleguide_id = args.styleguide_id or zeplin_cfg.get("styleguideId")
    screen_id = args.screen_id or zeplin_cfg.get("screenId")

    if not token:
        print("❌ 請設定 ZEPLIN_TOKEN 環境變數，或在 zeplin-xaml.config.json 的 zeplin.personalAccessToken 設定。")
        print("   取得方式：Zeplin → Profile → Developer → Personal access tokens")
        return 1
    if not project_id and not styleguide_id:
        print("❌ 請使用 --project-id / --styleguide-id 或在 config 的 zeplin 區塊設定。")
        return 1

    print(f"📥 Pulling from Zeplin: {project_id or styleguide_id}")
    client = ZeplinAPIClient(token)
    try:
        snapshot = fetch_snapshot(
            client,
            project_id=project_id,
            styleguide_id=None if project_id else styleguide_id,
            screen_id=screen_id,
        )
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        if status in (401, 403):
            print("❌ Zeplin API 401/403：Token 無效或已過期，請重新產生 ZEPLIN_TOKEN。")
        elif status == 404:
            print(f"❌ Zeplin API 404：找不到 '{project_id or styleguide_id}'，請確認 id 是否正確。")
        else:
            print(f"❌ Zeplin API 錯誤：{e}")
        return 1

    path = save_snapshot(snapshot, args.output or _snapshot_dir(config))
    print(f"   ✅ {len(snapshot['colors'])} colors, {len(snapshot['textStyles'])} text styles, "
          f"{len(snapshot['layers'])} top-level layers")
    print(f"   ✅ Saved to {path}")
    return 0


def _print_listing(code) -> int:
    if code is None:
        print("ℹ️  沒有可輸出的資源。")
        return 0
    print(code.code, end="")
    return 0


def cmd_colors(args, config: dict) -> int:
    context, _ = _load(args, config)
    if context is None:
        return 1
    return _print_listing(styleguide_colors(context))


def cmd_text_styles(args, config: dict) -> int:
    context, _ = _load(args, config)
    if context is None:
        return 1
    return _print_listing(styleguide_text_styles(context))


def perform_export(args, config: dict) -> int:
    """Export 核心邏輯，供 export 與 watch 共用."""
    context, _ = _load(args, config)
    if context is None:
        return 1
    output_dir = Path(args.output or config.get("export", {}).get("outputDir", "./Styles"))
    written = 0
    for result in (export_styleguide_colors(context), export_styleguide_text_styles(context)):
        if result is None:
            continue
        path = output_dir / result.filename
        _write(path, result.code)
        print(f"   📄 {path}")
        written += 1
    if not written:
        print("ℹ️  沒有可輸出的資源。")
    else:
        print(f"   ✅ Exported {written} files to {output_dir}")
    return 0


def _find(args, config: dict):
    context, snapshot = _load(args, config)
    if context is None:
        return None, None
    target = find_layer(snapshot_layers(snapshot), args.name)
    if target is None:
        print(f"❌ 快照中找不到圖層 '{args.name}'。")
        return None, None
    return context, target


def cmd_layer(args, config: dict) -> int:
    context, target = _find(args, config)
    if target is None:
        return 1
    print(layer(context, target).code, end="")
    return 0


def cmd_css(args, config: dict) -> int:
    context, target = _find(args, config)
    if target is None:
        return 1
    print(css(context, target).code, end="")
    return 0


def preview_layer_tree(layers, indent: int = 0) -> str:
    """除錯用：印出圖層樹與每個圖層的輸出類型."""
    lines = []
    prefix = "  " * indent
    for item in layers:
        lines.append(f"{prefix}├─ {item.name}  [{item.type}]  → {classify(item)}")
        if item.layers:
            lines.append(preview_layer_tree(item.layers, indent + 1))
    return "\n".join(lines)


def cmd_preview(args, config: dict) -> int:
    _, snapshot = _load(args, config)
    if snapshot is None:
        return 1
    layers = snapshot_layers(snapshot)
    print(f"👁️  Preview layer tree: {_snapshot_path(args, config)}")
    print(preview_layer_tree(layers))
    return 0


_WATCHED_EXTENSIONS = (".json", ".xml", ".css")


class ChangeHandler(FileSystemEventHandler):
    """檔案變更事件處理器，帶 debounce 防抖。"""

    def __init__(self, callback, debounce: float = 1.0):
        self.callback = callback
        self.last_trigger = 0.0
        self.debounce_seconds = debounce

    def on_modified(self, event):
        if event.is_directory:
            return
        if not event.src_path.endswith(_WATCHED_EXTENSIONS):
            return
        current_time = time.time()
        if current_time - self.last_trigger < self.debounce_seconds:
            return
        self.last_trigger = current_time
        print(f"\n🔄 File changed: {event.src_path}")
        self.callback()


def cmd_watch(args, config: dict) -> int:
    """Watch: 監聽快照（與自訂樣板）變更並自動 export."""
    snapshot_dir = os.path.dirname(_snapshot_path(args, config)) or "."
    templates_dir = config.get("export", {}).get("templatesDir")
    print(f"👀 Watching for changes in '{snapshot_dir}'...")
    print("   Press Ctrl+C to stop.")

    def export_task():
        try:
            perform_export(args, config)
        except OSError as e:
            print(f"   ⚠️  Export failed: {e}")

    export_task()

    event_handler = ChangeHandler(export_task)
    observer = Observer()
    observer.schedule(event_handler, path=snapshot_dir, recursive=False)
    if templates_dir and os.path.isdir(templates_dir):
        observer.schedule(event_handler, path=templates_dir, recursive=False)
    observer.start()

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        print("\n👋 Stopping watch...")
        observer.stop()
    finally:
        observer.join()
    return 0


def _add_snapshot_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--snapshot", help=f"Snapshot path (default <snapshotDir>/{SNAPSHOT_FILENAME})")
    p.add_argument("--duplicate-suffix", help="Override options.duplicateSuffix ('' disables)")
    p.add_argument("--sort", action="store_true", help="Sort resources by name")
    p.add_argument("--ignore-font-family", action="store_true", help="Omit FontFamily setters")
    p.add_argument("--alignment", choices=["style", "label"], help="Which site owns HorizontalTextAlignment")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="zeplin-xaml: Zeplin → Xamarin.Forms XAML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--config", "-c", default=DEFAULT_CONFIG_PATH, help="Config path")
    parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command")

    pull_p = sub.add_parser("pull", help="Zeplin → snapshot",
        epilog="Examples:\n  zeplin-xaml pull --project-id 5d0b...\n  zeplin-xaml pull --styleguide-id 5e1c...",
        formatter_class=argparse.RawDescriptionHelpFormatter)
    pull_p.add_argument("--project-id", help="Zeplin project id")
    pull_p.add_argument("--styleguide-id", help="Zeplin styleguide id")
    pull_p.add_argument("--screen-id", help="Screen whose latest version layers are saved")
    pull_p.add_argument("--output", help="Snapshot directory")

    colors_p = sub.add_parser("colors", help="Print <Color> listing")
    _add_snapshot_args(colors_p)

    styles_p = sub.add_parser("text-styles", help="Print <Style> listing")
    _add_snapshot_args(styles_p)

    export_p = sub.add_parser("export", help="Write Colors.xaml and Labels.xaml",
        epilog="Examples:\n  zeplin-xaml export --output ./MyApp/Styles --sort",
        formatter_class=argparse.RawDescriptionHelpFormatter)
    _add_snapshot_args(export_p)
    export_p.add_argument("--output", help="Output directory")

    layer_p = sub.add_parser("layer", help="Print XAML for one layer")
    layer_p.add_argument("name", help="Layer name")
    _add_snapshot_args(layer_p)

    css_p = sub.add_parser("css", help="Print CSS for one layer")
    css_p.add_argument("name", help="Layer name")
    _add_snapshot_args(css_p)

    preview_p = sub.add_parser("preview", help="Preview layer tree")
    _add_snapshot_args(preview_p)

    watch_p = sub.add_parser("watch", help="Re-export when the snapshot changes")
    _add_snapshot_args(watch_p)
    watch_p.add_argument("--output", help="Output directory")
    return parser


_COMMANDS = {
    "pull": cmd_pull,
    "colors": cmd_colors,
    "text-styles": cmd_text_styles,
    "export": perform_export,
    "layer": cmd_layer,
    "css": cmd_css,
    "preview": cmd_preview,
    "watch": cmd_watch,
}


def main(argv: Optional[list] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = load_config(args.config)
    _configure_templates(config)

    handler = _COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 0
    return handler(args, config)


if __name__ == "__main__":
    sys.exit(main())
