"""Unit tests for repeatrule_cli.utils.exit_codes."""

from __future__ import annotations

import pytest

from repeatrule_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    SUCCESS,
    get_exit_code_description,
    get_exit_code_name,
)


class TestExitCodeConstants:
    def test_values(self):
        assert (SUCCESS, ERROR_GENERAL, ERROR_INVALID_ARGS, ERROR_NOT_FOUND) == (0, 1, 2, 5)

    def test_all_unique(self):
        codes = [SUCCESS, ERROR_GENERAL, ERROR_INVALID_ARGS, ERROR_NOT_FOUND]
        assert len(set(codes)) == len(codes)


class TestGetExitCodeName:
    @pytest.mark.parametrize(
        "code,name",
        [
            (SUCCESS, "SUCCESS"),
            (ERROR_GENERAL, "ERROR_GENERAL"),
            (ERROR_INVALID_ARGS, "ERROR_INVALID_ARGS"),
            (ERROR_NOT_FOUND, "ERROR_NOT_FOUND"),
        ],
    )
    def test_known(self, code, name):
        assert get_exit_code_name(code) == name

    def test_unknown(self):
        assert get_exit_code_name(42) == "UNKNOWN(42)"


class TestGetExitCodeDescription:
    def test_known_codes_have_descriptions(self):
        for code in (SUCCESS, ERROR_GENERAL, ERROR_INVALID_ARGS, ERROR_NOT_FOUND):
            assert get_exit_code_description(code) != "Unknown error"

    def test_unknown(self):
        assert get_exit_code_description(-1) == "Unknown error"
