"""Shared test fixtures and configuration.

Keeps config and log files inside a temporary directory so tests never
touch the real user directories.
"""

from __future__ import annotations

import logging
import logging.handlers
from datetime import UTC, datetime
from unittest.mock import patch

import pytest

from repeatrule_cli.models.rule import RepeatRule
from repeatrule_cli.models.types import EndType, Frequency, MonthMode


def _reset_logger(logger_mod) -> None:
    logger = logging.getLogger("repeatrule_cli")
    for handler in [
        h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
    ]:
        handler.close()
        logger.removeHandler(handler)
    logger_mod._logger = None


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point config and log directories at *tmp_path* for every test."""
    import repeatrule_cli.utils.logger as logger_mod
    from repeatrule_cli.services.config_service import get_config_service

    tmpdir = str(tmp_path)
    get_config_service.cache_clear()
    _reset_logger(logger_mod)

    with patch("repeatrule_cli.services.config_service.user_config_dir", return_value=tmpdir):
        with patch("repeatrule_cli.utils.logger.user_log_dir", return_value=tmpdir):
            yield tmp_path

    get_config_service.cache_clear()
    _reset_logger(logger_mod)


@pytest.fixture()
def last_friday_rule() -> RepeatRule:
    """Monthly on the last Friday, five times."""
    return RepeatRule(
        frequency=Frequency.MONTHLY,
        month_mode=MonthMode.BY_WEEKDAY,
        week_ordinal=7,
        weekday=6,
        end_type=EndType.COUNT,
        count=5,
    )


@pytest.fixture()
def new_year_eve() -> datetime:
    return datetime(2025, 12, 31, tzinfo=UTC)
