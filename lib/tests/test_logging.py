from __future__ import annotations

import logging

from megalabs_sms import NullLogger, StdlibLogger
from megalabs_sms.logging_ import log_message


def test_log_message_prefix() -> None:
    assert log_message("hello") == "[MegalabsSms] hello"


def test_stdlib_logger_maps_levels(caplog) -> None:
    caplog.set_level(logging.INFO, logger="megalabs_sms")
    logger = StdlibLogger()

    logger.info("a")
    logger.warn("b")
    logger.error("c")

    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
        (logging.INFO, "a"),
        (logging.WARNING, "b"),
        (logging.ERROR, "c"),
    ]


def test_null_logger_accepts_everything() -> None:
    logger = NullLogger()
    logger.info("a")
    logger.warn("b")
    logger.error("c")
