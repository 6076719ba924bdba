"""Shared pytest fixtures for classenum tests."""

import pytest

from classenum.core.converter import EnumerationConverter
from classenum.core.tags import TypeTagRegistry
from classenum.example import MyEnum


@pytest.fixture
def converter() -> EnumerationConverter[MyEnum]:
    """Return a converter bound to the example enumeration."""
    return EnumerationConverter(MyEnum)


@pytest.fixture
def registry() -> TypeTagRegistry:
    """Return an empty tag registry, isolated from the shared one."""
    return TypeTagRegistry()
