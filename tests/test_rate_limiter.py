from unittest.mock import MagicMock

import pytest

from rate_limiter import FixedDelayRateLimiter, NoopRateLimiter


def test_fixed_delay_sleeps_each_turn() -> None:
    sleep = MagicMock()
    limiter = FixedDelayRateLimiter(2.0, sleep=sleep)

    limiter.wait_turn()
    limiter.wait_turn()

    assert sleep.call_count == 2
    sleep.assert_called_with(2.0)


def test_fixed_delay_rejects_negative_delay() -> None:
    with pytest.raises(ValueError):
        FixedDelayRateLimiter(-1)


def test_noop_never_blocks() -> None:
    assert NoopRateLimiter().wait_turn() is None
