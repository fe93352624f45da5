from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from sitegen.logging import reset_logging
from tests._fixtures.site_builder import SiteBuilder


@pytest.fixture
def site_builder(tmp_path: Path) -> SiteBuilder:
    """Provide a reusable site source builder rooted at the pytest tmp_path."""
    return SiteBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _detach_sitegen_handlers() -> Iterator[None]:
    """Drop handlers bound to pytest's captured streams once each test ends."""
    yield
    reset_logging()
