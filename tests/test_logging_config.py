from __future__ import annotations

import logging

from logging_config import ContextualFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="services.simulator",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Generated reading",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_appends_known_extra_keys() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")

    message = formatter.format(_record(value="72.40", history_size=3, unrelated="x"))

    assert message == "Generated reading | value=72.40 history_size=3"


def test_formatter_skips_missing_or_none_values() -> None:
    formatter = ContextualFormatter(fmt="%(message)s")

    assert formatter.format(_record(running=None)) == "Generated reading"
    assert formatter.format(_record(running=False)) == "Generated reading | running=False"
