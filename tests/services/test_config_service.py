"""Unit tests for services/config_service.py.

Uses a real ConfigService pointed at a tmp_path directory (see conftest).
"""

from __future__ import annotations

import json

import pytest

from repeatrule_cli.models.config_models import AppConfig
from repeatrule_cli.services.config_service import ConfigService, get_config_service


@pytest.fixture()
def svc() -> ConfigService:
    return ConfigService()


class TestLoadConfig:
    def test_first_run_writes_defaults(self, svc, tmp_path):
        config = svc.config
        assert config == AppConfig()
        saved = json.loads((tmp_path / "config.json").read_text(encoding="utf-8"))
        assert saved["preview"]["limit"] == 10
        assert saved["output"]["format"] == "pretty"

    def test_reads_existing_file(self, tmp_path):
        (tmp_path / "config.json").write_text(
            json.dumps({"output": {"format": "json"}}), encoding="utf-8"
        )
        assert ConfigService().config.output.format == "json"

    def test_corrupt_file_raises(self, tmp_path):
        (tmp_path / "config.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(RuntimeError, match="Failed to load config"):
            ConfigService().load_config()


class TestGet:
    def test_nested_value(self, svc):
        assert svc.get("preview.limit") == 10
        assert svc.get("editor.apply_fallback") is True

    def test_section(self, svc):
        assert svc.get("output").format == "pretty"

    @pytest.mark.parametrize("key", ["nope", "preview.nope", "preview.limit.extra"])
    def test_unknown_key(self, svc, key):
        assert svc.get(key) is None


class TestSet:
    def test_set_persists(self, svc, tmp_path):
        svc.set("preview.limit", 25)
        assert svc.get("preview.limit") == 25
        assert ConfigService().get("preview.limit") == 25

    def test_string_values_are_coerced(self, svc):
        svc.set("preview.limit", "7")
        svc.set("output.color", "false")
        assert svc.get("preview.limit") == 7
        assert svc.get("output.color") is False

    @pytest.mark.parametrize("key", ["nope", "preview", "preview.nope", "x.y"])
    def test_unknown_key(self, svc, key):
        with pytest.raises(KeyError):
            svc.set(key, 1)

    @pytest.mark.parametrize(
        "key,value",
        [("preview.limit", 0), ("preview.limit", 501), ("output.format", "xml")],
    )
    def test_invalid_value(self, svc, key, value):
        with pytest.raises(ValueError):
            svc.set(key, value)
        assert svc.config == AppConfig()


class TestReset:
    def test_reset_restores_defaults(self, svc):
        svc.set("output.format", "yaml")
        svc.reset_config()
        assert svc.get("output.format") == "pretty"
        assert ConfigService().get("output.format") == "pretty"


class TestFactory:
    def test_cached(self):
        assert get_config_service() is get_config_service()
