"""Pytest configuration and fixtures."""

from typing import Callable

import pytest

from workbench.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached per process; drop the cache around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def repeat_bytes(value: int) -> Callable[[int], bytes]:
    return lambda n: bytes([value]) * n


@pytest.fixture
def zero_bytes() -> Callable[[int], bytes]:
    return repeat_bytes(0x00)


@pytest.fixture
def full_bytes() -> Callable[[int], bytes]:
    return repeat_bytes(0xFF)
