"""Rejection tracker implementations."""

from __future__ import annotations

import logging
from typing import Any

from futura.kernel.ports import TrackOperation


class LoggingRejectionTracker:
    """Log unhandled rejections and late handling."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger("futura.rejections")

    def track(self, future: Any, operation: TrackOperation) -> None:
        if operation == "reject":
            self.logger.warning("unhandled rejection of %r", future)
        else:
            self.logger.debug("rejection of %r handled late", future)
