"""Shared fixtures and markers for langident tests."""

import importlib.util
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent


def pytest_configure(config):
    config.addinivalue_line("markers", "lmdb: opens an LMDB environment on disk")


def _load(relative_path):
    path = ROOT / relative_path
    spec = importlib.util.spec_from_file_location(path.stem + "_under_test", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def load_script():
    """Import a standalone script (tools/, scripts/) as a module."""
    return _load


@pytest.fixture
def store(tmp_path):
    from langident.cache.store import IdentifierStore

    s = IdentifierStore(tmp_path / "ids.lmdb")
    yield s
    s.close()
