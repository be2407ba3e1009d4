"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from behaviorprops import PropDef
from behaviorprops.config import CodecSettings, get_settings


@pytest.fixture
def make_def():
    """Factory for property declarations."""

    def _make(prop_type: str, name: str = "prop", default: str | None = None, **extra) -> PropDef:
        return PropDef(type=prop_type, variable_name=name, default_value_string=default, **extra)

    return _make


@pytest.fixture
def strict_settings():
    """Settings that reject bad numeric literals and bracketed arrays."""
    return CodecSettings(lenient_numeric_literals=False, accept_bracketed_array_literals=False)


@pytest.fixture
def fresh_settings():
    """Drop cached process settings between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
