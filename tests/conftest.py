"""Shared test fixtures for verstree tests."""

import os
from collections.abc import Generator
from datetime import datetime
from pathlib import Path

import pytest
from typer.testing import CliRunner

from verstree import output
from verstree.store import InMemoryVersionStore
from verstree.store_dir import set_store_dir


@pytest.fixture(autouse=True)
def reset_cli_globals() -> Generator[None, None, None]:
    """Clear process-wide state the CLI callback sets."""
    yield
    set_store_dir(None)
    output.set_output_context(None)


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def workspace(tmp_path: Path) -> Generator[Path, None, None]:
    """Temporary working directory; cwd is changed to it for the test."""
    original_cwd = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_cwd)


@pytest.fixture
def memory_store() -> InMemoryVersionStore:
    """In-memory store with three files recorded at different times.

    a.py: three versions, latest today
    b.md: one version, a year ago
    c.txt: two versions, latest yesterday
    """
    store = InMemoryVersionStore()
    store.add_version("file:///proj/a.py", "a\nb", datetime(2024, 6, 1, 10, 0))
    store.add_version("file:///proj/b.md", "# notes\n", datetime(2023, 6, 1, 10, 0))
    store.add_version("file:///proj/a.py", "a\nb\nc", datetime(2024, 6, 14, 10, 0))
    store.add_version("file:///proj/c.txt", "x", datetime(2024, 6, 10, 8, 0))
    store.add_version("file:///proj/a.py", "a\nc", datetime(2024, 6, 15, 9, 0))
    store.add_version("file:///proj/c.txt", "x\ny", datetime(2024, 6, 14, 23, 0))
    return store
