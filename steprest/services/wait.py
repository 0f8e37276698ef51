"""Polling helper that repeats an action until its result satisfies a condition."""

import logging
import time
from typing import Any, Callable, Protocol, runtime_checkable

from steprest.config import Settings
from steprest.exceptions import WaitTimeoutError

logger = logging.getLogger(__name__)


@runtime_checkable
class Waitable(Protocol):
    """Something that can re-run its last action and expose the outcome."""

    def retry(self) -> None: ...

    def result(self) -> Any: ...


class Wait:
    """
    Re-run a waitable until a predicate on its result holds.

    The current result is checked first; each failed check is followed by a
    pause of ``interval`` seconds and a ``retry()``, at most ``max_retries``
    times.
    """

    def __init__(
        self,
        interval: float = 1.0,
        max_retries: int = 10,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.interval = interval
        self.max_retries = max_retries
        self._sleep = sleep

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "Wait":
        return cls(
            interval=settings.wait_interval_ms / 1000.0,
            max_retries=settings.wait_max_retries,
            **kwargs,
        )

    def until(self, waitable: Waitable, predicate: Callable[[Any], bool]) -> Any:
        """
        Poll until ``predicate(waitable.result())`` is true.

        Returns:
            The first result the predicate accepted

        Raises:
            WaitTimeoutError: If the predicate still fails after all retries
        """
        result = waitable.result()
        if predicate(result):
            return result

        for attempt in range(1, self.max_retries + 1):
            self._sleep(self.interval)
            waitable.retry()
            result = waitable.result()
            logger.debug("Wait attempt %d/%d", attempt, self.max_retries)
            if predicate(result):
                return result

        logger.warning("Condition not met after %d retries", self.max_retries)
        raise WaitTimeoutError(self.max_retries, result)
