"""Shared pytest fixtures."""

import pytest
from pathlib import Path

from esqldiag.resources import LOCALE_ENV_VAR, load_strings, set_strings


@pytest.fixture(autouse=True)
def default_strings(monkeypatch):
    """Every test starts (and ends) with the default English string table."""
    monkeypatch.delenv(LOCALE_ENV_VAR, raising=False)
    set_strings(None)
    yield
    set_strings(None)


@pytest.fixture
def strings():
    return load_strings("en")


@pytest.fixture
def examples_dir():
    """Path to tests/examples/ containing .esql files."""
    return Path(__file__).parent / "examples"


@pytest.fixture(params=["simple.esql", "crlf_tabs.esql", "trailing_newlines.esql"])
def example_file(examples_dir, request):
    """Parametrized: one of the example query files."""
    return examples_dir / request.param
