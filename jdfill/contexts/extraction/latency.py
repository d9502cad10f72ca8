"""
Optional artificial latency for interactive use.

The extractor itself is synchronous and immediate. Interactive front ends that
want the analysis to feel like a remote call can wrap it with
simulate_latency(); headless callers and tests should use the bare function.
"""

import random
import time
from functools import wraps
from typing import Callable, Optional, TypeVar

from omegaconf import DictConfig

from jdfill.contexts.extraction.logger import _log_debug

T = TypeVar("T")


def simulate_latency(
    min_seconds: float = 0.8,
    max_seconds: float = 1.2,
    sleep: Callable[[float], None] = time.sleep,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator that sleeps a random duration before calling the wrapped function.

    Args:
        min_seconds: Lower bound of the delay
        max_seconds: Upper bound of the delay
        sleep: Sleep function (injectable for tests)

    Returns:
        Decorator preserving the wrapped function's signature and return value

    Raises:
        ValueError: If the bounds are negative or inverted
    """
    if min_seconds < 0 or max_seconds < min_seconds:
        raise ValueError(
            f"Invalid latency bounds: min={min_seconds}, max={max_seconds}"
        )

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            delay = random.uniform(min_seconds, max_seconds)
            _log_debug(f"Simulating {delay:.2f}s latency before {func.__name__}")
            sleep(delay)
            return func(*args, **kwargs)

        return wrapper

    return decorator


def with_configured_latency(
    func: Callable[..., T], config: DictConfig, enabled: Optional[bool] = None
) -> Callable[..., T]:
    """
    Wrap func with the latency settings from config.

    Args:
        func: Function to wrap (normally extract_job_fields)
        config: Loaded configuration with a `latency` section
        enabled: Override config.latency.enabled

    Returns:
        The wrapped function, or func unchanged when latency is disabled
    """
    if enabled is None:
        enabled = config.latency.enabled
    if not enabled:
        return func
    return simulate_latency(config.latency.min_seconds, config.latency.max_seconds)(func)
