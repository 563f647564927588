"""Checkpoint capture for create and mutate operations.

A checkpoint records what an operation expected to find right before it
touched the store: nothing (creation) or a specific revision (mutation).
Checkpoints are returned to the caller and never stored here.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from ...client import ClientConfig
from ...errors import ConfigurationError, NotFound
from ...models import CreationCheckpoint, MutationCheckpoint

DocumentFetcher = Callable[[str], Awaitable[dict[str, Any] | None]]


def _checkpoint_resource(config: ClientConfig) -> tuple[str, str]:
    if not config.project_id:
        raise ConfigurationError("Project ID is not configured")
    if not config.dataset:
        raise ConfigurationError("Dataset is not configured")
    return config.project_id, config.dataset


def get_creation_checkpoint(document_id: str, config: ClientConfig) -> CreationCheckpoint:
    """Checkpoint for a document about to be created.

    New content always starts as a draft or a version, so callers pass the id
    already resolved to that form; it is used verbatim.
    """
    project_id, dataset = _checkpoint_resource(config)
    return CreationCheckpoint(project_id=project_id, dataset=dataset, id=document_id)


async def get_mutation_checkpoint(
    document_id: str,
    config: ClientConfig,
    fetch: DocumentFetcher,
) -> MutationCheckpoint:
    """Fetch the current revision of a document about to be mutated.

    The checkpoint's ``_id`` comes from the fetched document rather than the
    input, since the lookup may resolve through an alternate namespace.

    Raises:
        NotFound: If no document exists at the id. No checkpoint is produced.
    """
    project_id, dataset = _checkpoint_resource(config)

    document = await fetch(document_id)
    if not document:
        raise NotFound(document_id)

    return MutationCheckpoint(
        project_id=project_id,
        dataset=dataset,
        id=document["_id"],
        rev=document.get("_rev", ""),
    )
