"""Unit tests for SuggestingGroup (typer_helpers.py)."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
import typer

from repeatrule_cli.utils.typer_helpers import SuggestingGroup

COMMANDS = ("encode", "decode", "descriptor", "preview", "presets")


def _group(*names: str) -> SuggestingGroup:
    group = SuggestingGroup(name="repeatrule")
    group.commands = {name: MagicMock() for name in names}
    return group


def _ctx() -> MagicMock:
    ctx = MagicMock()
    ctx.info_name = "repeatrule"
    return ctx


def _resolve_with_typo(group: SuggestingGroup, typo: str) -> list[str]:
    """Resolve *typo* against *group* and return what was printed."""
    printed: list[str] = []
    console = MagicMock()
    console.print.side_effect = lambda *args, **kw: printed.append(str(args[0]) if args else "")

    with patch.object(
        SuggestingGroup.__bases__[0], "resolve_command", side_effect=Exception("No such command")
    ):
        with patch("repeatrule_cli.utils.typer_helpers.get_console", return_value=console):
            with pytest.raises(typer.Exit):
                group.resolve_command(_ctx(), [typo])
    return printed


class TestSuggestingGroup:
    def test_valid_command_passes_through(self):
        group = _group(*COMMANDS)
        with patch.object(
            SuggestingGroup.__bases__[0],
            "resolve_command",
            return_value=("encode", MagicMock(), ["encode"]),
        ):
            assert group.resolve_command(_ctx(), ["encode"])[0] == "encode"

    def test_single_suggestion(self):
        printed = _resolve_with_typo(_group(*COMMANDS), "previw")
        combined = " ".join(printed)
        assert 'unknown command "previw"' in combined
        assert "Did you mean this?" in combined
        assert "preview" in combined

    def test_multiple_suggestions(self):
        printed = _resolve_with_typo(_group(*COMMANDS), "preset")
        combined = " ".join(printed)
        assert "Did you mean one of these?" in combined
        assert "presets" in combined
        assert "preview" in combined

    def test_no_close_match_reraises(self):
        group = _group(*COMMANDS)
        original = Exception("No such command 'xyzabc'")
        with patch.object(SuggestingGroup.__bases__[0], "resolve_command", side_effect=original):
            with pytest.raises(Exception) as exc_info:
                group.resolve_command(_ctx(), ["xyzabc"])
        assert exc_info.value is original

    def test_empty_args_reraises(self):
        group = _group()
        original = Exception("No args")
        with patch.object(SuggestingGroup.__bases__[0], "resolve_command", side_effect=original):
            with pytest.raises(Exception) as exc_info:
                group.resolve_command(_ctx(), [])
        assert exc_info.value is original
