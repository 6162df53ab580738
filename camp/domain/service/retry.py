"""Bounded retry of optimistic-concurrency conflicts."""

import asyncio
import random
from typing import Awaitable, Callable, TypeVar

import logfire

from camp.config import VotingSettings
from camp.domain.error import ConflictError

T = TypeVar("T")


def backoff_delay(attempt: int, policy: VotingSettings) -> float:
    """Delay before retry number ``attempt`` (1-based), with full jitter."""
    ceiling = min(
        policy.max_delay_seconds, policy.base_delay_seconds * (2 ** (attempt - 1))
    )
    return random.uniform(0, ceiling)


async def retry_on_conflict(
    operation: Callable[[], Awaitable[T]],
    policy: VotingSettings,
    name: str,
) -> T:
    """Run ``operation`` until it commits or attempts run out.

    Only ``ConflictError`` is retried. Every other error propagates on the
    first occurrence.

    Args:
        operation: Zero-argument coroutine factory running one transaction
        policy: Attempt limit and backoff bounds
        name: Operation name for logs

    Returns:
        The operation's result

    Raises:
        ConflictError: If every attempt lost its race
    """
    attempt = 1
    while True:
        try:
            return await operation()
        except ConflictError:
            if attempt >= policy.max_attempts:
                logfire.warn(
                    "Transaction conflict, giving up", operation=name, attempts=attempt
                )
                raise
            delay = backoff_delay(attempt, policy)
            logfire.debug(
                "Transaction conflict, retrying",
                operation=name,
                attempt=attempt,
                delay=delay,
            )
            attempt += 1
            await asyncio.sleep(delay)
