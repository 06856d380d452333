"""
Jinja2 template renderer for generated XAML / CSS fragments.

Templates live in the package's templates/ directory. A project-level
directory can override individual templates by file name.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, select_autoescape

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _number_filter(value: Any) -> str:
    """14.0 → "14", 14.5 → "14.5"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def create_jinja_env(project_templates_dir: Optional[Path] = None) -> Environment:
    loaders = []
    if project_templates_dir and project_templates_dir.is_dir():
        loaders.append(FileSystemLoader(str(project_templates_dir)))
    loaders.append(FileSystemLoader(str(TEMPLATES_DIR)))

    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=select_autoescape(["xml"], default_for_string=False),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["number"] = _number_filter
    return env


# Module-level singleton
_env: Optional[Environment] = None


def get_jinja_env() -> Environment:
    global _env
    if _env is None:
        _env = create_jinja_env()
    return _env


def configure_project_templates(project_templates_dir: Optional[Path]) -> None:
    """Reconfigure the shared environment; None restores package templates."""
    global _env
    _env = create_jinja_env(project_templates_dir)


def render(template_name: str, record: dict) -> str:
    template = get_jinja_env().get_template(template_name)
    return template.render(**record)
