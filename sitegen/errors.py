"""Error types raised while generating a site."""

from __future__ import annotations


class SiteGenError(RuntimeError):
    """Base class for every failure that aborts a generation run."""

    prefix = "Error"

    def __init__(self, message: str) -> None:
        super().__init__(f"{self.prefix}: {message}")


class SiteIOError(SiteGenError):
    """Raised when listing, copying, or writing on the filesystem fails."""

    prefix = "IO error"


class PathError(SiteGenError):
    """Raised when an input path does not live under the source root."""

    prefix = "Path error"


class TemplateLookupError(SiteGenError):
    """Raised when a page template cannot be found or parsed."""

    prefix = "Template error"


class TemplateRenderError(SiteGenError):
    """Raised when a page template fails while rendering."""

    prefix = "Render error"


class ClassificationError(SiteGenError):
    """Raised for entries that are neither files nor directories."""

    prefix = "Unexpected error"


class ConfigError(SiteGenError):
    """Raised when the site configuration file cannot be parsed."""

    prefix = "Config error"


__all__ = [
    "ClassificationError",
    "ConfigError",
    "PathError",
    "SiteGenError",
    "SiteIOError",
    "TemplateLookupError",
    "TemplateRenderError",
]
