# -*- coding: utf-8 -*-
"""Pytest configuration and shared fixtures."""

import logging

import pytest

from unitconv.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate each test from UNITCONV_* variables and cached settings."""
    for name in ("UNITCONV_LOG_LEVEL", "UNITCONV_LOG_FORMAT", "UNITCONV_DEFAULT_PRECISION"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Drop stream handlers installed by configure_logging() during a test."""
    root = logging.getLogger()
    before, level = set(root.handlers), root.level
    yield
    for handler in root.handlers[:]:
        if handler not in before and type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture(scope="session")
def linear_pairs():
    """Every ordered (category, from, to) pair of the linear categories."""
    from unitconv.data import LINEAR_FACTORS

    return [
        (category, a, b)
        for category, table in LINEAR_FACTORS.items()
        for a in table
        for b in table
    ]
