"""Action dispatch to the content store.

One remote call per document or release action. The store enforces which transitions are legal
and applies each action atomically; nothing is retried or re-validated here,
and store errors propagate unchanged.
"""

import logging

from ...client import ContentStore
from ...models import Action, ActionResult, ReleaseAction

logger = logging.getLogger(__name__)


async def dispatch(client: ContentStore, action: Action | ReleaseAction) -> ActionResult:
    """Send a single action and return the store's acknowledgement."""
    result = await client.perform_action(action)
    logger.info(
        f"Dispatched {action.wire_action_type()} on dataset {client.config.dataset} "
        f"(transaction {result.transaction_id})"
    )
    return result
