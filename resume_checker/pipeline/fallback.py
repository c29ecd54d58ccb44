from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def with_timeout_fallback(
    primary: Callable[[], Awaitable[T]],
    fallback: Callable[[], T],
    timeout: float,
    *,
    stage: str = "remote",
) -> T:
    """Return ``primary()`` if it completes within ``timeout`` seconds, else ``fallback()``.

    On timeout the in-flight primary is cancelled before the fallback runs. Any
    exception from the primary also selects the fallback; the fallback itself is
    expected not to raise.
    """
    try:
        return await asyncio.wait_for(primary(), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning("pipeline_stage_timeout stage=%s timeout_s=%s", stage, timeout)
    except Exception as exc:
        logger.warning("pipeline_stage_fallback stage=%s reason=%s", stage, str(exc) or type(exc).__name__)
    return fallback()
