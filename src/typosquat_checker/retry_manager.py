"""
Retry Manager for the typosquat checker.

This module provides retry logic with exponential backoff for transient DNS
errors. Definitive answers are never retried: a successful lookup, NXDOMAIN
and an empty answer are all final.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Awaitable, Callable, Optional, Union

from .enums import ResolutionErrorCode

if TYPE_CHECKING:
    from .config import ResolverConfig
    from .dns_resolver import LookupResult


class RetryManager:
    """
    Manages retry logic with exponential backoff.

    With the default of zero retries every operation runs exactly once.
    """

    # Error codes that indicate transient errors (should retry)
    TRANSIENT_ERROR_CODES = frozenset({
        ResolutionErrorCode.TIMEOUT,
        ResolutionErrorCode.NO_NAMESERVERS,
        ResolutionErrorCode.NETWORK_ERROR,
    })

    def __init__(
        self,
        max_retries: int = 0,
        base_delay_seconds: float = 0.2,
        max_delay_seconds: float = 2.0,
    ) -> None:
        """
        Initialize the retry manager.

        Args:
            max_retries: Additional attempts after the first one
            base_delay_seconds: Delay before the first retry
            max_delay_seconds: Upper bound for any single delay
        """
        self._max_retries = max(0, max_retries)
        self._base_delay = base_delay_seconds
        self._max_delay = max_delay_seconds

    @classmethod
    def from_config(cls, config: ResolverConfig) -> RetryManager:
        return cls(
            max_retries=config.max_retries,
            base_delay_seconds=config.base_delay_seconds,
            max_delay_seconds=config.max_delay_seconds,
        )

    @property
    def max_retries(self) -> int:
        return self._max_retries

    def _calculate_delay(self, attempt: int) -> float:
        """
        Calculate wait time with exponential backoff.

        delay(n) = base_delay * 2^n, capped at max_delay.

        Args:
            attempt: The current attempt number (0-indexed)

        Returns:
            The delay in seconds before the next retry
        """
        delay = self._base_delay * (2 ** attempt)
        return min(delay, self._max_delay)

    def is_retryable(self, error_code: Union[ResolutionErrorCode, str]) -> bool:
        """
        Check if an error code indicates a transient error.

        Args:
            error_code: ResolutionErrorCode or its string value
        """
        if not isinstance(error_code, ResolutionErrorCode):
            try:
                error_code = ResolutionErrorCode(str(error_code))
            except ValueError:
                return False
        return error_code in self.TRANSIENT_ERROR_CODES

    def should_retry(self, result: LookupResult) -> bool:
        """Retry only lookups that failed with a transient error."""
        if result.error is None:
            return False
        return self.is_retryable(result.error.code)

    async def execute_lookup_with_retry(
        self,
        operation: Callable[[], Awaitable[LookupResult]],
    ) -> tuple[LookupResult, int]:
        """
        Execute a DNS lookup with retry logic.

        The operation is expected to report failures through
        LookupResult.error rather than by raising.

        Args:
            operation: The async lookup to execute

        Returns:
            Tuple of (final LookupResult, number of attempts)
        """
        attempts = 0
        max_attempts = self._max_retries + 1
        last_result: Optional[LookupResult] = None

        while attempts < max_attempts:
            last_result = await operation()
            attempts += 1

            if not self.should_retry(last_result):
                break

            if attempts >= max_attempts:
                break

            await asyncio.sleep(self._calculate_delay(attempts - 1))

        assert last_result is not None
        return last_result, attempts
