"""CLI behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from sitegen.cli import _build_parser, main


def test_cli_missing_source_exits_with_status_1(capsys) -> None:
    parser = _build_parser()
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args([])

    assert excinfo.value.code == 1
    assert "sitegen: error:" in capsys.readouterr().err


def test_cli_accepts_verbose_and_log_file() -> None:
    parser = _build_parser()
    args = parser.parse_args(["site", "--verbose", "--log-file", "build.log"])
    assert args.source == "site"
    assert args.verbose is True
    assert args.log_file == Path("build.log")


def test_main_generates_site_and_reports_summary(site_builder, capsys) -> None:
    site_builder.write({"index.html.jinja": "Hello", "img/logo.png": b"\x89PNG"})

    main([str(site_builder.path())])

    out = capsys.readouterr().out
    assert "Site generated at" in out
    assert "(1 pages, 1 files, 0 directories)" in out
    assert (site_builder.output() / "index.html").read_text(encoding="utf-8") == "Hello"


def test_main_exits_with_error_on_failure(site_builder, capsys) -> None:
    site_builder.write({"index.html.jinja": "{% if %}"})

    with pytest.raises(SystemExit) as excinfo:
        main([str(site_builder.path())])

    assert excinfo.value.code == 1
    assert "Template error:" in capsys.readouterr().err


def test_main_exits_when_source_is_missing(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "missing")])

    assert excinfo.value.code == 1
    assert "Source directory not found" in capsys.readouterr().err


def test_main_writes_log_file(site_builder, tmp_path: Path) -> None:
    site_builder.write({"robots.txt": "ok"})
    log_file = tmp_path / "build.log"

    main([str(site_builder.path()), "--log-file", str(log_file)])

    assert "Copied file:" in log_file.read_text(encoding="utf-8")


def test_main_reports_non_utf8_page_without_traceback(site_builder, capsys) -> None:
    site_builder.write({"index.html.jinja": b"caf\xe9"})

    with pytest.raises(SystemExit) as excinfo:
        main([str(site_builder.path())])

    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "Template error:" in err
    assert "Traceback" not in err


def test_main_quiet_hides_progress_messages(site_builder, capsys) -> None:
    site_builder.write({"robots.txt": "ok"})

    main([str(site_builder.path()), "--quiet"])

    captured = capsys.readouterr()
    assert "Copied file:" not in captured.err
    assert "Site generated at" in captured.out
