from __future__ import annotations

import logging

from megalabs_sms import StdlibLogger


def setup_logging(verbose: bool) -> None:
    # client messages are INFO/WARNING/ERROR; show INFO only when verbose
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    # подавляем шум httpx по умолчанию
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.DEBUG if verbose else logging.WARNING)


def client_logger() -> StdlibLogger:
    return StdlibLogger(logging.getLogger("megalabs_sms"))
