"""Shared test fixtures"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
import structlog

from hexconv.cache import FifoCache


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Drop logging config bound to a previous test's captured stderr"""
    yield
    structlog.reset_defaults()


@pytest.fixture
def write_input(tmp_path: Path) -> Callable[[str], Path]:
    """Write text to an input file under tmp_path and return its path"""

    def _write(content: str, name: str = "mat.in") -> Path:
        path = tmp_path / name
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def output_path(tmp_path: Path) -> Path:
    """Destination file path (not yet created)"""
    return tmp_path / "mat.in.x"


@pytest.fixture
def line_cache() -> FifoCache[str, str]:
    """Line cache with the default CLI capacity"""
    return FifoCache(5000)
