"""Bulk operation coordinator.

Applies one per-item operation to a bounded list of items. Items run
concurrently; a failing item is recorded in its own outcome and never
affects its siblings.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar

from ...config import DEFAULT_MAX_BULK_ITEMS
from ...errors import BatchItemFailure, BatchTooLarge
from ...models import BulkResult, BulkSummary, ItemOutcome

logger = logging.getLogger(__name__)

MAX_BULK_ITEMS = DEFAULT_MAX_BULK_ITEMS

T = TypeVar("T")


def check_batch_size(items: Sequence[Any], limit: int = MAX_BULK_ITEMS) -> None:
    """Reject a batch above the cap before anything is dispatched.

    Raises:
        BatchTooLarge: If ``items`` holds more than ``limit`` entries.
    """
    if len(items) > limit:
        raise BatchTooLarge(len(items), limit)


async def _run_item(index: int, item: T, operation: Callable[[T], Awaitable[Any]]) -> ItemOutcome:
    try:
        payload = await operation(item)
    except Exception as e:
        failure = BatchItemFailure(index, item, str(e) or e.__class__.__name__)
        logger.warning(f"Bulk item {index} ({item!r}) failed: {failure}")
        return ItemOutcome(success=False, item=item, error=str(failure))
    return ItemOutcome(success=True, item=item, payload=payload)


async def process_batch(
    items: Sequence[T],
    operation: Callable[[T], Awaitable[Any]],
) -> BulkResult:
    """Run ``operation`` for every item and aggregate the outcomes.

    More than one item runs concurrently with unordered completion; a single
    item is awaited directly. ``results[i]`` always belongs to ``items[i]``.
    """
    if len(items) > 1:
        outcomes = await asyncio.gather(
            *[_run_item(index, item, operation) for index, item in enumerate(items)]
        )
    else:
        outcomes = [await _run_item(index, item, operation) for index, item in enumerate(items)]

    successful = sum(1 for outcome in outcomes if outcome.success)
    summary = BulkSummary(
        total=len(outcomes),
        successful=successful,
        failed=len(outcomes) - successful,
    )
    return BulkResult(results=list(outcomes), summary=summary)


def bulk_operation_message(operation_name: str, summary: BulkSummary) -> str:
    """E.g. ``Processed 3 documents: 2 successful, 1 failed``."""
    return (
        f"Processed {summary.total} {operation_name}: "
        f"{summary.successful} successful, {summary.failed} failed"
    )
