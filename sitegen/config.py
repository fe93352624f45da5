"""Configuration loading for sitegen (_sitegen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import ConfigError

CONFIG_FILENAME = "_sitegen.yml"


@dataclass
class SiteConfig:
    """Represents the settings defined in _sitegen.yml."""

    root: Path
    exclude: List[str] = field(default_factory=list)


def load_config(source_root: Path, config_file: Optional[Path] = None) -> SiteConfig:
    """Load configuration for the site rooted at ``source_root``.

    The file name starts with an underscore, so the default skip rule keeps
    it out of the generated output.
    """
    root = Path(source_root)
    config_path = Path(config_file) if config_file is not None else root / CONFIG_FILENAME

    if config_file is None and not config_path.is_file():
        return SiteConfig(root=root)

    data = _read_config(config_path)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path.name} must contain a mapping at the root")

    return SiteConfig(root=root, exclude=_as_str_list(data.get("exclude")))


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Could not read {path}: {exc}") from exc
    if not text.strip():
        return {}

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = ["CONFIG_FILENAME", "SiteConfig", "load_config"]
