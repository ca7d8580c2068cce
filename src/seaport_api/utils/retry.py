"""Fixed-delay retry policy shared by the API operations."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar

from src.seaport_api.config.constants import DEFAULT_RETRIES, RETRY_DELAY_SECONDS
from src.seaport_api.core.exceptions import ConfigurationError, InvalidOrderError
from src.seaport_api.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

# Errors that cannot succeed on a second attempt
NON_RETRYABLE_ERRORS: tuple[type[Exception], ...] = (ConfigurationError, InvalidOrderError)


@dataclass(frozen=True)
class RetryPolicy:
    """Retry an operation a bounded number of times with a fixed delay.

    ``retries`` counts the attempts made after the first one, so the default
    of 2 allows at most three calls. The delay never grows between attempts.

    Attributes:
        retries: Retries after the initial attempt
        delay: Seconds to wait between attempts
        sleep: Delay primitive, replaceable in tests
        non_retryable: Exception types that abort immediately
    """

    retries: int = DEFAULT_RETRIES
    delay: float = RETRY_DELAY_SECONDS
    sleep: Callable[[float], None] = field(default=time.sleep, repr=False, compare=False)
    non_retryable: tuple[type[Exception], ...] = NON_RETRYABLE_ERRORS

    def delays(self, retries: int | None = None) -> list[float]:
        """Return the waits performed before each retry."""
        budget = self.retries if retries is None else retries
        return [max(0.0, self.delay)] * max(0, budget)

    def should_retry(self, error: Exception, retries_left: int) -> bool:
        """Decide whether ``error`` may be retried with ``retries_left`` remaining."""
        if retries_left <= 0:
            return False
        return not isinstance(error, self.non_retryable)

    def call(self, operation: Callable[[], T], retries: int | None = None, name: str = "") -> T:
        """Run ``operation`` until it succeeds or the retry budget is spent.

        Args:
            operation: Zero-argument callable performing one attempt
            retries: Per-call override of the retry budget
            name: Operation name used in log events

        Returns:
            The first successful result

        Raises:
            Exception: The last error once retries are exhausted, or any
                non-retryable error straight away
        """
        waits = self.delays(retries)
        attempt = 0

        while True:
            attempt += 1
            try:
                return operation()
            except Exception as e:
                retries_left = len(waits) - (attempt - 1)
                if not self.should_retry(e, retries_left):
                    logger.warning(
                        "Giving up on operation",
                        operation=name,
                        attempt=attempt,
                        error_type=type(e).__name__,
                        error=str(e),
                    )
                    raise
                delay = waits[attempt - 1]
                logger.info(
                    "Retrying operation",
                    operation=name,
                    attempt=attempt,
                    retries_left=retries_left - 1,
                    delay=delay,
                    error_type=type(e).__name__,
                    error=str(e),
                )
                if delay > 0:
                    self.sleep(delay)
