"""Shared test fixtures and configuration.

Keeps tests away from the real user config and log directories.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from rrdescribe.models.descriptor import RecurDescriptor, SpanDescriptor


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point config at *tmp_path* and silence the file logger."""
    from rrdescribe.services.config_service import get_config_service

    quiet = logging.getLogger("rrdescribe.tests")
    quiet.addHandler(logging.NullHandler())
    quiet.propagate = False

    get_config_service.cache_clear()
    with patch(
        "rrdescribe.services.config_service.user_config_dir",
        return_value=str(tmp_path / "config"),
    ):
        with patch("rrdescribe.utils.logger._logger", quiet):
            yield tmp_path
    get_config_service.cache_clear()


# ---------------------------------------------------------------------------
# Descriptor factories
# ---------------------------------------------------------------------------


@pytest.fixture()
def recur():
    """Factory for recurring descriptors in UTC with a one hour duration."""

    def _make(freq: str = "daily", **kwargs) -> RecurDescriptor:
        data = {
            "effect": "active",
            "tz": "UTC",
            "unit": "ms",
            "freq": freq,
            "duration": {"hours": 1},
        }
        data.update(kwargs)
        return RecurDescriptor.model_validate(data)

    return _make


@pytest.fixture()
def span():
    """Factory for span descriptors."""

    def _make(**kwargs) -> SpanDescriptor:
        data = {"effect": "active", "tz": "UTC", "unit": "ms"}
        data.update(kwargs)
        return SpanDescriptor.model_validate(data)

    return _make
