"""Batch reporters that do not depend on a user interface."""

from __future__ import annotations

import logging

logger = logging.getLogger("conv2nc")


class LoggingReporter:
    """Send batch notices and failures to the ``conv2nc`` logger."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logger

    def notice(self, message: str) -> None:
        self.log.info(message)

    def warning(self, message: str) -> None:
        self.log.warning(message)
