"""Unit tests for services/config_service.py.

Uses a real ConfigService pointed at the tmp_path directory set up in
conftest.
"""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from rrdescribe.models.config_models import AppConfig
from rrdescribe.services.config_service import ConfigService, get_config_service


@pytest.fixture()
def svc() -> ConfigService:
    return ConfigService()


class TestLoadAndSave:
    def test_defaults_without_file(self, svc):
        assert not svc.config_path.exists()
        assert svc.config == AppConfig()

    def test_save_writes_json(self, svc):
        svc.save_config()
        data = json.loads(svc.config_path.read_text(encoding="utf-8"))
        assert data["rule"]["timezone"] == "UTC"

    def test_reload_from_disk(self, svc):
        svc.set("describe.ordinals", "short")
        fresh = ConfigService()
        assert fresh.get("describe.ordinals") == "short"

    def test_corrupt_file_falls_back(self, svc):
        svc.config_path.write_text("{broken", encoding="utf-8")
        assert ConfigService().config == AppConfig()

    def test_invalid_values_fall_back(self, svc):
        svc.config_path.write_text(json.dumps({"rule": {"unit": "ns"}}), encoding="utf-8")
        assert ConfigService().config == AppConfig()


class TestGetSet:
    def test_get_nested(self, svc):
        assert svc.get("describe.hour_cycle") == "h23"

    def test_get_section(self, svc):
        assert svc.get("rule").unit == "ms"

    def test_get_unknown(self, svc):
        with pytest.raises(KeyError):
            svc.get("describe.hour_cycle.extra")

    def test_set_validates(self, svc):
        with pytest.raises(ValidationError):
            svc.set("describe.limits", "always")
        assert svc.get("describe.limits") == "none"

    def test_set_unknown_key(self, svc):
        with pytest.raises(KeyError):
            svc.set("describe.colour", "red")


class TestReset:
    def test_reset_key(self, svc):
        svc.set("describe.time_format", "hms")
        svc.set("describe.hour_cycle", "h12")
        svc.reset("describe.time_format")
        assert svc.get("describe.time_format") == "hm"
        assert svc.get("describe.hour_cycle") == "h12"

    def test_reset_section(self, svc):
        svc.set("rule.timezone", "Asia/Tokyo")
        svc.reset("rule")
        assert svc.get("rule.timezone") == "UTC"

    def test_reset_all(self, svc):
        svc.set("describe.show_bounds", True)
        svc.reset()
        assert svc.config == AppConfig()


class TestFactory:
    def test_cached(self):
        assert get_config_service() is get_config_service()


class TestDescribeDefaults:
    def test_overrides_win(self):
        cfg = AppConfig().describe.to_describe_config(limits="count_only", hour_cycle="h12")
        assert cfg.limits == "count_only"
        assert cfg.time.hour_cycle == "h12"
        assert cfg.time.time_format == "hm"

    def test_none_overrides_ignored(self):
        cfg = AppConfig().describe.to_describe_config(show_timezone=None, lowercase=None)
        assert cfg.show_timezone is False
        assert cfg.lowercase is True
