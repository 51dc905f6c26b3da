"""
Deadline racing for blocking upstream calls.

Operations run on a shared thread pool. When the deadline wins, the caller
gets a FetchTimeoutError and the still-running operation is abandoned: a
best-effort cancel is issued and its eventual outcome is discarded. Nothing
is interrupted at the transport level beyond the socket timeout each request
already carries.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from museum.src.constants.met import MAX_FETCH_WORKERS
from museum.src.services.met.errors import FetchTimeoutError

logger = logging.getLogger(__name__)

_executor = ThreadPoolExecutor(
    max_workers=MAX_FETCH_WORKERS, thread_name_prefix="met-fetch"
)


@dataclass(frozen=True)
class FetchOutcome:
    """Result of one guarded operation: either a value or the error it failed with."""

    key: Any
    value: Any = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _discard_outcome(future: Future) -> None:
    if future.cancelled():
        return
    error = future.exception()
    if error is not None:
        logger.debug(f"Abandoned upstream call finished with {error!r}")


def _abandon(future: Future) -> None:
    future.cancel()
    future.add_done_callback(_discard_outcome)


def with_timeout(operation: Callable[[], Any], timeout: float) -> Any:
    """Run `operation` and return its result, or raise FetchTimeoutError after `timeout` seconds.

    Exceptions raised by the operation itself propagate unchanged.
    """
    future = _executor.submit(operation)
    done, _ = wait([future], timeout=timeout)
    if future not in done:
        _abandon(future)
        raise FetchTimeoutError(f"Upstream call did not finish within {timeout}s")
    return future.result()


def gather_with_timeout(
    operations: Iterable[tuple[Any, Callable[[], Any]]], timeout: float
) -> list[FetchOutcome]:
    """Run keyed operations in parallel, each bounded by `timeout`.

    Returns one FetchOutcome per operation, in input order. Failures and
    missed deadlines are recorded on the outcome, never raised.
    """
    keyed_futures = [(key, _executor.submit(operation)) for key, operation in operations]
    if not keyed_futures:
        return []

    wait([future for _, future in keyed_futures], timeout=timeout)

    outcomes = []
    for key, future in keyed_futures:
        if not future.done():
            _abandon(future)
            error = FetchTimeoutError(f"Upstream call for {key!r} did not finish within {timeout}s")
            outcomes.append(FetchOutcome(key=key, error=error))
            continue
        error = future.exception()
        if error is not None:
            outcomes.append(FetchOutcome(key=key, error=error))
        else:
            outcomes.append(FetchOutcome(key=key, value=future.result()))
    return outcomes


def successful_values(outcomes: Iterable[FetchOutcome]) -> list[Any]:
    """Keep the values of successful outcomes, preserving order."""
    return [outcome.value for outcome in outcomes if outcome.ok]
