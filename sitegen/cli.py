"""CLI entrypoint for sitegen."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .config import load_config
from .errors import SiteGenError
from .generator import generate_site
from .logging import configure_logging


class _Parser(argparse.ArgumentParser):
    """Argument parser whose usage errors exit with status 1 like every other failure."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="sitegen",
        description="Render *.html.jinja pages and copy assets into <source>/dist.",
    )
    parser.add_argument(
        "source",
        help="Path to the site source directory. Output is written to its dist/ folder.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=False,
        help="Only print warnings and errors on the console.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Read settings from this file instead of <source>/_sitegen.yml.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for sitegen."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(
            verbose=bool(args.verbose), quiet=bool(args.quiet), log_file=args.log_file
        )
    except OSError as exc:
        parser.exit(1, f"IO error: {exc}\n")

    source = Path(args.source)
    try:
        config = load_config(source, config_file=args.config) if args.config else None
        report = generate_site(source, config=config)
    except SiteGenError as exc:
        parser.exit(1, f"{exc}\n")

    print(
        f"Site generated at {_relativize(report.output)} "
        f"({len(report.pages)} pages, {len(report.files)} files, "
        f"{len(report.dirs)} directories)"
    )


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
