"""Jinja2 environment setup and page rendering."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from jinja2 import (
    Environment,
    FileSystemLoader,
    Template,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
    select_autoescape,
)

from .errors import SiteIOError, TemplateLookupError, TemplateRenderError

_AUTOESCAPE_EXTENSIONS = ("html", "htm", "xml", "html.jinja", "htm.jinja", "xml.jinja")


def create_environment(source_root: Path) -> Environment:
    """Return an environment that resolves template names against ``source_root``."""
    loader = FileSystemLoader(str(source_root))
    return Environment(
        loader=loader,
        autoescape=select_autoescape(_AUTOESCAPE_EXTENSIONS, default_for_string=False),
    )


def load_template(env: Environment, name: str) -> Template:
    """Fetch and compile ``name`` from the environment loader."""
    try:
        return env.get_template(name)
    except TemplateNotFound as exc:
        raise TemplateLookupError(f"Template not found: {exc.name}") from exc
    except TemplateSyntaxError as exc:
        raise TemplateLookupError(
            f"{exc.filename or name}:{exc.lineno}: {exc.message}"
        ) from exc
    except UnicodeDecodeError as exc:
        raise TemplateLookupError(f"{name} is not valid UTF-8: {exc}") from exc


def render_template(template: Template, stream: BinaryIO) -> None:
    """Render ``template`` with an empty context as UTF-8 into ``stream``."""
    name = template.name or "<template>"
    try:
        template.stream().dump(stream, encoding="utf-8")
    except TemplateError as exc:
        raise TemplateRenderError(f"{name}: {exc}") from exc
    except OSError as exc:
        raise SiteIOError(f"Could not write rendered {name}: {exc}") from exc
    except Exception as exc:
        # Errors raised by expressions, e.g. ``{{ 1 / 0 }}``.
        raise TemplateRenderError(f"{name}: {exc}") from exc


__all__ = ["create_environment", "load_template", "render_template"]
