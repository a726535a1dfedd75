"""Shared pytest fixtures for the datastore test suite."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

import yaml_datastore
from yaml_datastore.datastore import Datastore


@pytest.fixture
def fixtures_dir() -> Path:
    """Returns the absolute path to the tests/fixtures/ directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def data_dir(tmp_path: Path, fixtures_dir: Path) -> Path:
    """Copies fixture files to a temp directory for test isolation."""
    dest = tmp_path / "data"
    shutil.copytree(fixtures_dir, dest, dirs_exist_ok=True)
    return dest


@pytest.fixture
def datastore(data_dir: Path) -> Datastore:
    """A datastore over the copied fixture files with default settings."""
    return yaml_datastore.open(data_dir)


@pytest.fixture
def store_root(tmp_path: Path) -> Path:
    """An empty datastore root for tests that write their own files."""
    root = tmp_path / "store"
    root.mkdir()
    return root
