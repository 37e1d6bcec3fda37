"""Shared test fixtures."""

import os
import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from attrmeta import AttributeMetaStore, InMemoryOptionStore


@pytest.fixture
def options():
    """Fresh in-memory option slot store."""
    return InMemoryOptionStore()


@pytest.fixture
def store(options):
    """Metadata store over an empty option store."""
    return AttributeMetaStore(options)


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch):
    """Keep ATTRMETA_* variables from the developer shell out of tests."""
    for name in list(os.environ):
        if name.startswith("ATTRMETA_"):
            monkeypatch.delenv(name)
