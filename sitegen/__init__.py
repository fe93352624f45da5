"""Static site generator: renders Jinja pages and copies assets into dist/."""

from .classifier import build_skip_predicate, classify_tree, is_page, must_skip
from .config import SiteConfig, load_config
from .errors import (
    ClassificationError,
    ConfigError,
    PathError,
    SiteGenError,
    SiteIOError,
    TemplateLookupError,
    TemplateRenderError,
)
from .generator import generate_site
from .materializer import Materializer
from .models import BuildReport, EntryKind, InputEntry
from .paths import to_output_path

__all__ = [
    "BuildReport",
    "ClassificationError",
    "ConfigError",
    "EntryKind",
    "InputEntry",
    "Materializer",
    "PathError",
    "SiteConfig",
    "SiteGenError",
    "SiteIOError",
    "TemplateLookupError",
    "TemplateRenderError",
    "build_skip_predicate",
    "classify_tree",
    "generate_site",
    "is_page",
    "load_config",
    "must_skip",
    "to_output_path",
]
