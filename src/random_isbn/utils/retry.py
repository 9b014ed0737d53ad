"""Retry utilities with tenacity."""

import logging
from typing import Callable, List, Type

import requests
from tenacity import (
    after_log,
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
    wait_random,
)

from ..config import settings

logger = logging.getLogger(__name__)


def create_retry_decorator(
    max_attempts: int = None,
    max_wait: int = None,
    base_wait: float = 1.0,
    jitter: bool = True,
    retry_exceptions: List[Type[Exception]] = None,
) -> Callable:
    """
    Create a retry decorator with exponential backoff.

    Args:
        max_attempts: Maximum attempts (default from settings)
        max_wait: Maximum wait time in seconds (default from settings)
        base_wait: Base wait time for exponential backoff
        jitter: Whether to add up to a second of random jitter
        retry_exceptions: Exception types to retry on

    Returns:
        Retry decorator that re-raises the last exception when attempts run out
    """
    if max_attempts is None:
        max_attempts = settings.network_max_retries

    if max_wait is None:
        max_wait = settings.network_retry_max_wait

    if retry_exceptions is None:
        retry_exceptions = [Exception]

    wait_strategy = wait_exponential(multiplier=base_wait, max=max_wait)
    if jitter:
        wait_strategy = wait_strategy + wait_random(0, 1)

    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_strategy,
        retry=retry_if_exception_type(tuple(retry_exceptions)),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        after=after_log(logger, logging.DEBUG),
        reraise=True,
    )


def create_network_retry_decorator(max_attempts: int = None, max_wait: int = None) -> Callable:
    """Create retry decorator for connection failures and timeouts.

    HTTP error statuses are not retried; a catalog that answers 4xx/5xx is
    reported to the caller straight away.
    """
    return create_retry_decorator(
        max_attempts=max_attempts,
        max_wait=max_wait,
        base_wait=1.5,
        jitter=True,
        retry_exceptions=[requests.ConnectionError, requests.Timeout],
    )
