"""Single-pass site generation: classify the source tree, then materialize it."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from jinja2 import Environment

from .classifier import OUTPUT_DIR_NAME, build_skip_predicate, classify_tree
from .config import SiteConfig, load_config
from .errors import SiteIOError
from .logging import get_logger
from .materializer import Materializer
from .models import BuildReport
from .paths import ensure_dir
from .templates import create_environment

logger = get_logger("generator")


def generate_site(
    source: Path | str,
    *,
    config: Optional[SiteConfig] = None,
    env: Optional[Environment] = None,
) -> BuildReport:
    """Render and copy everything under ``source`` into ``source/dist``.

    Stops at the first failure; output written before it stays on disk.
    """
    source_root = Path(source)
    if not source_root.exists():
        raise SiteIOError(f"Source directory not found: {source_root}")
    if not source_root.is_dir():
        raise SiteIOError(f"Source path is not a directory: {source_root}")

    if config is None:
        config = load_config(source_root)

    output_root = source_root / OUTPUT_DIR_NAME
    logger.info("Generating %s into %s", source_root, output_root)
    ensure_dir(output_root)

    environment = env or create_environment(source_root)
    entries = classify_tree(source_root, skip=build_skip_predicate(config.exclude))
    logger.debug("Classified %d entries", len(entries))

    materializer = Materializer(source_root, output_root, environment)
    report = BuildReport(source=source_root, output=output_root)
    for entry in entries:
        report.record(entry.kind, materializer.materialize(entry))
    return report


__all__ = ["OUTPUT_DIR_NAME", "generate_site"]
