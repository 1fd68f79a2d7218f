"""Unit tests for config management commands (view, get, set, reset)."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from repeatrule_cli.commands.config import app
from repeatrule_cli.services.config_service import get_config_service

runner = CliRunner()


class TestHelpFlags:
    def test_app_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for name in ("view", "get", "set", "reset"):
            assert name in result.output


class TestView:
    def test_json(self):
        result = runner.invoke(app, ["view", "--output", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["preview"]["limit"] == 10
        assert data["editor"]["apply_fallback"] is True

    def test_table(self):
        result = runner.invoke(app, ["view"])
        assert result.exit_code == 0
        assert "Preview" in result.output


class TestGet:
    def test_known_key(self):
        result = runner.invoke(app, ["get", "preview.limit"])
        assert result.exit_code == 0
        assert result.output.strip() == "10"

    def test_unknown_key_exits_5(self):
        result = runner.invoke(app, ["get", "preview.nope"])
        assert result.exit_code == 5
        assert "not found" in result.output


class TestSet:
    def test_sets_value(self):
        result = runner.invoke(app, ["set", "output.format", "yaml"])
        assert result.exit_code == 0
        assert "Success" in result.output
        assert get_config_service().get("output.format") == "yaml"

    def test_unknown_key_exits_5(self):
        result = runner.invoke(app, ["set", "api.endpoint", "x"])
        assert result.exit_code == 5

    def test_invalid_value_exits_2(self):
        result = runner.invoke(app, ["set", "preview.limit", "1000"])
        assert result.exit_code == 2
        assert get_config_service().get("preview.limit") == 10


class TestReset:
    def test_reset_with_yes(self):
        get_config_service().set("preview.limit", 3)
        result = runner.invoke(app, ["reset", "--yes"])
        assert result.exit_code == 0
        assert get_config_service().get("preview.limit") == 10

    def test_reset_declined_aborts(self):
        get_config_service().set("preview.limit", 3)
        result = runner.invoke(app, ["reset"], input="n\n")
        assert result.exit_code == 1
        assert get_config_service().get("preview.limit") == 3
