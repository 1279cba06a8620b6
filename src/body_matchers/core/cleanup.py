"""Background reclamation of expired correlation entries.

A correlated matcher configured with entry_ttl_seconds hides expired entries
from lookups, but the records stay in memory until something removes them.
Hosts that keep matchers alive for a long time run this task next to them.

The sweep interval comes from the matcher's MatcherConfig
(cleanup_interval_seconds) unless the caller overrides it. Each sweep runs
store.cleanup_expired() in a worker thread, because the in-memory store
blocks on a threading.Lock that request threads also hold.

Examples:
    Run cleanup for a matcher while the host is up::

        from body_matchers.core.cleanup import start_cleanup_task, stop_cleanup_task

        matcher = RequestIdMatcher(
            "error",
            MatcherConfig(entry_ttl_seconds=600, cleanup_interval_seconds=60),
        )
        task = await start_cleanup_task(matcher)
        ...
        await stop_cleanup_task(task)
"""

import asyncio
import contextlib

from body_matchers.matchers.base import CorrelatedMatcher
from body_matchers.observability.logging import get_logger
from body_matchers.observability.metrics import record_cleanup
from body_matchers.storage.base import CorrelationStore

logger = get_logger(__name__)

STOP_TIMEOUT_SECONDS = 5.0


async def _sweep(store: CorrelationStore) -> None:
    try:
        removed = await asyncio.to_thread(store.cleanup_expired)
    except Exception as e:
        logger.error("cleanup.failed", error=str(e), error_type=type(e).__name__)
        return

    record_cleanup(removed)
    log = logger.info if removed else logger.debug
    log("cleanup.completed", records_removed=removed)


async def cleanup_loop(
    store: CorrelationStore,
    interval_seconds: float,
    stop_event: asyncio.Event | None = None,
) -> None:
    """Sweep expired entries from store every interval_seconds.

    The first sweep runs immediately. A failing sweep is logged and the loop
    keeps going; only stop_event (or cancellation) ends it.
    """
    stop_event = stop_event or asyncio.Event()
    logger.info("cleanup.started", interval_seconds=interval_seconds)

    while not stop_event.is_set():
        await _sweep(store)
        with contextlib.suppress(asyncio.TimeoutError):
            await asyncio.wait_for(stop_event.wait(), timeout=interval_seconds)

    logger.info("cleanup.stopped")


async def start_cleanup_task(
    matcher: CorrelatedMatcher,
    interval_seconds: float | None = None,
) -> asyncio.Task[None]:
    """Start sweeping the matcher's store in the background.

    Args:
        matcher: Correlated matcher whose store is swept
        interval_seconds: Overrides matcher.config.cleanup_interval_seconds

    Returns:
        The running task. Pass it to stop_cleanup_task() on shutdown.
    """
    if interval_seconds is None:
        interval_seconds = matcher.config.cleanup_interval_seconds

    stop_event = asyncio.Event()
    task = asyncio.create_task(cleanup_loop(matcher.store, interval_seconds, stop_event))
    task._stop_event = stop_event  # type: ignore[attr-defined]
    return task


async def stop_cleanup_task(task: asyncio.Task[None]) -> None:
    """Ask the cleanup task to finish, cancelling it if it does not in time."""
    stop_event: asyncio.Event | None = getattr(task, "_stop_event", None)
    if stop_event is not None:
        stop_event.set()

    done, _ = await asyncio.wait({task}, timeout=STOP_TIMEOUT_SECONDS)
    if done:
        return

    logger.warning("cleanup.stop_timeout", timeout_seconds=STOP_TIMEOUT_SECONDS)
    task.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await task
