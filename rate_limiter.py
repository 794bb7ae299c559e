"""Pacing collaborators for outbound detail-page requests."""

from __future__ import annotations

import logging
import time
from typing import Callable, Protocol

DEFAULT_DELAY_SECONDS = 2.0

LOGGER = logging.getLogger(__name__)


class RateLimiter(Protocol):
    def wait_turn(self) -> None: ...


class FixedDelayRateLimiter:
    """Sleep a fixed number of seconds before every request."""

    def __init__(
        self,
        delay_seconds: float = DEFAULT_DELAY_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if delay_seconds < 0:
            raise ValueError(f"delay_seconds must be >= 0, got {delay_seconds}")
        self.delay_seconds = delay_seconds
        self._sleep = sleep

    def wait_turn(self) -> None:
        LOGGER.debug("Rate limiter: sleeping %.2fs", self.delay_seconds)
        self._sleep(self.delay_seconds)


class NoopRateLimiter:
    """Never waits. Used in tests and dry local runs."""

    def wait_turn(self) -> None:
        return None
