"""
Retry executor for store operations.

Wraps a coroutine factory with bounded exponential backoff. Every failed
attempt is logged with the operation's context; after the retry budget is
spent the original exception propagates to the caller.
"""

import asyncio
from typing import Any, Awaitable, Callable, Optional, TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..logging_config import get_logger
from ..metrics import store_retries_total

T = TypeVar("T")

DEFAULT_MAX_RETRIES = 3
DEFAULT_BASE_DELAY_SECONDS = 2.0
DEFAULT_MAX_DELAY_SECONDS = 30.0


class RetryExecutor:
    """
    Run store calls with retry on any exception.

    With the defaults an operation is attempted 4 times, waiting
    2s, 4s and 8s between attempts.
    """

    def __init__(
        self,
        max_retries: int = DEFAULT_MAX_RETRIES,
        base_delay_seconds: float = DEFAULT_BASE_DELAY_SECONDS,
        max_delay_seconds: float = DEFAULT_MAX_DELAY_SECONDS,
        logger: Optional[Any] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Initialize retry executor.

        Args:
            max_retries: Retries after the first failure
            base_delay_seconds: Wait before the first retry, doubled afterwards
            max_delay_seconds: Upper bound for a single wait
            logger: Structured logger (defaults to a module logger)
            sleep: Awaitable sleep function
        """
        self.max_retries = max_retries
        self.base_delay_seconds = base_delay_seconds
        self.max_delay_seconds = max_delay_seconds
        self._sleep = sleep
        self._logger = logger or get_logger(__name__, component="retry_executor")

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    async def execute(
        self,
        operation: Callable[[], Awaitable[T]],
        description: str,
        name: str = "store",
    ) -> T:
        """
        Execute ``operation`` with retry.

        Args:
            operation: Zero-argument coroutine factory, called once per attempt
            description: Context for log events
            name: Short operation label for metrics

        Returns:
            The operation's result

        Raises:
            Exception: The last exception raised by ``operation``
        """
        retrying = AsyncRetrying(
            retry=retry_if_exception_type(Exception),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(
                multiplier=self.base_delay_seconds, max=self.max_delay_seconds
            ),
            before_sleep=lambda state: self._log_retry(state, description, name),
            sleep=self._sleep,
            reraise=True,
        )

        try:
            async for attempt in retrying:
                with attempt:
                    try:
                        result = await operation()
                    except Exception as e:
                        self._logger.error(
                            description,
                            attempt=attempt.retry_state.attempt_number,
                            error=str(e),
                            error_type=type(e).__name__,
                        )
                        raise
        except Exception as e:
            self._logger.error(
                "Store operation failed after retries",
                operation=description,
                attempts=self.max_attempts,
                error=str(e),
            )
            raise

        return result

    def _log_retry(
        self, retry_state: RetryCallState, description: str, name: str
    ) -> None:
        exception = retry_state.outcome.exception() if retry_state.outcome else None
        wait_seconds = retry_state.next_action.sleep if retry_state.next_action else 0.0
        store_retries_total.labels(operation=name).inc()
        self._logger.warning(
            "Retrying store operation",
            operation=description,
            retry=retry_state.attempt_number,
            wait_seconds=wait_seconds,
            error=str(exception),
        )
