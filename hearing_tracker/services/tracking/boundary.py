"""
Defensive boundary for operations driven by the live recording UI.

A failure while tracking must never take down an in-progress hearing, so
public operations are wrapped with ``defensive``: unexpected exceptions are
logged and a fallback value (usually the caller's unmodified state) is
returned. With ``strict_mode`` enabled the exception propagates instead,
which is how tests and development builds surface broken invariants.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from hearing_tracker.core.config import get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


def defensive(fallback: Callable[..., Any]) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Wrap an operation so failures degrade to ``fallback(*args, **kwargs)``.

    Args:
        fallback: Called with the original arguments to produce the value
            returned when the wrapped operation raises.
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return func(*args, **kwargs)
            except Exception:
                if get_settings().strict_mode:
                    raise
                logger.exception("%s failed; falling back to a safe value", func.__name__)
                return fallback(*args, **kwargs)

        return wrapper

    return decorator


def unchanged_state(state: Any = None, *_args: Any, **_kwargs: Any) -> Any:
    """Fallback that hands the caller's state back untouched."""
    return state
