"""Backoff retry for store adapters that touch the filesystem or network."""
from __future__ import annotations

import functools
import random
import time
from typing import Any, Callable, Tuple, Type

from salary_engine.log import get_logger

log = get_logger(__name__)


def retry(
    *,
    max_attempts: int = 3,
    base_delay: float = 0.5,
    max_delay: float = 10.0,
    backoff_factor: float = 2.0,
    jitter: bool = True,
    retryable: Tuple[Type[BaseException], ...] = (OSError,),
    sleep: Callable[[float], None] | None = None,
) -> Callable:
    """Retry the wrapped call on ``retryable`` errors, re-raising the last one."""
    if max_attempts < 1:
        raise ValueError("max_attempts must be >= 1")

    def decorator(fn: Callable) -> Callable:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            attempt = 1
            while True:
                try:
                    return fn(*args, **kwargs)
                except retryable as exc:
                    if attempt >= max_attempts:
                        log.error("%s gave up after %d attempts: %s",
                                  fn.__qualname__, attempt, exc)
                        raise
                    delay = min(base_delay * backoff_factor ** (attempt - 1), max_delay)
                    if jitter:
                        delay *= 0.5 + random.random()
                    log.warning("%s attempt %d/%d failed (%s), retrying in %.2fs",
                                fn.__qualname__, attempt, max_attempts, exc, delay)
                    (sleep or time.sleep)(delay)
                    attempt += 1

        return wrapper

    return decorator
