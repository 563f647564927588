"""Document operations: one canonical pipeline per tool operation.

Every mutating operation follows the same steps:
    1. resolve the caller's id to the id the operation targets
    2. capture a checkpoint (creation, or the current revision)
    3. issue exactly one mutating call to the content store

Single-item tools and bulk tools both call these functions. Content store
failures are translated into ExternalActionFailure here; precondition errors
(InvalidIdKind, NotFound, NoChangesRequested) propagate unchanged.
"""

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from functools import partial
from typing import Any

from ..client import ContentStore
from ..errors import ContentStoreError, ExternalActionFailure, NoChangesRequested, NotFound
from ..models import (
    AppendOperation,
    DeleteAction,
    DraftHandling,
    IncOperation,
    OperationOutcome,
    PublishAction,
    SetOperation,
    UnpublishAction,
    UnsetOperation,
    VersionDiscardAction,
    VersionReplaceAction,
    VersionUnpublishAction,
)
from .core import (
    check_release_id,
    dispatch,
    draft_id_of,
    generate_document_id,
    get_creation_checkpoint,
    get_mutation_checkpoint,
    lookup_document,
    resolve,
    version_id_of,
)

logger = logging.getLogger(__name__)

# Fields owned by the store; never copied between documents
SYSTEM_FIELDS = frozenset({"_id", "_rev", "_createdAt", "_updatedAt"})


@contextmanager
def store_errors() -> Iterator[None]:
    """Translate content store failures into ExternalActionFailure."""
    try:
        yield
    except ContentStoreError as e:
        raise ExternalActionFailure(str(e), status_code=e.status_code) from e


def _copy_content(document: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in document.items() if key not in SYSTEM_FIELDS}


# ============ READ ============


async def get_document(
    client: ContentStore,
    document_id: str,
    release_id: str | None = None,
    draft_handling: DraftHandling = DraftHandling.PRESERVE,
) -> OperationOutcome:
    """Fetch a document by id, optionally the version in a release."""
    target_id = resolve(document_id, release_id, draft_handling=draft_handling)

    with store_errors():
        document = await lookup_document(client, target_id)
    if not document:
        raise NotFound(target_id)

    return OperationOutcome(
        message=f"Retrieved document '{document['_id']}'",
        data={"document": document},
    )


# ============ CREATE ============


async def create_document(
    client: ContentStore,
    document_type: str,
    content: dict[str, Any] | None = None,
    release_id: str | None = None,
) -> OperationOutcome:
    """Create a new draft, or a new version when a release is given."""
    published_id = generate_document_id()
    if release_id:
        document_id = version_id_of(published_id, check_release_id(release_id))
    else:
        document_id = draft_id_of(published_id)
    checkpoint = get_creation_checkpoint(document_id, client.config)

    document = {**_copy_content(content or {}), "_id": document_id, "_type": document_type}
    with store_errors():
        result = await client.mutate([{"create": document}], return_documents=True)

    created = _final_document(result) or document
    logger.info(f"Created document {document_id} of type {document_type}")
    return OperationOutcome(
        message=f"Created document '{document_id}'",
        data={"document": created, "transactionId": result.get("transactionId")},
        checkpoints=[checkpoint],
    )


async def create_version(client: ContentStore, document_id: str, release_id: str) -> OperationOutcome:
    """Copy a document's current draft or published content into a release."""
    published_id = resolve(document_id, False)
    version_id = version_id_of(published_id, check_release_id(release_id))

    with store_errors():
        source = await lookup_document(client, document_id)
    if not source:
        raise NotFound(document_id)

    checkpoint = get_creation_checkpoint(version_id, client.config)
    document = {**_copy_content(source), "_id": version_id}
    with store_errors():
        result = await client.mutate([{"create": document}], return_documents=True)

    logger.info(f"Created version {version_id} from {source['_id']}")
    return OperationOutcome(
        message=f"Added document '{published_id}' to release '{release_id}' as '{version_id}'",
        data={
            "versionId": version_id,
            "sourceId": source["_id"],
            "transactionId": result.get("transactionId"),
        },
        checkpoints=[checkpoint],
    )


# ============ PATCH ============


def _patch_mutations(
    target_id: str,
    revision: str,
    operations: Sequence[SetOperation | UnsetOperation | AppendOperation | IncOperation],
) -> list[dict[str, Any]]:
    """Build patch mutations guarded by the checkpoint revision.

    Each operation becomes its own patch, in the order given, so later
    operations see the effect of earlier ones. Only the first patch carries
    ``ifRevisionID`` since the revision changes once per transaction.
    """
    patches: list[dict[str, Any]] = []

    for operation in operations:
        if isinstance(operation, SetOperation):
            patches.append({"set": {operation.path: operation.value}})
        elif isinstance(operation, UnsetOperation):
            patches.append({"unset": [operation.path]})
        elif isinstance(operation, IncOperation):
            patches.append({"inc": {operation.path: operation.amount}})
        elif isinstance(operation, AppendOperation):
            patches.append({"insert": {"after": f"{operation.path}[-1]", "items": operation.items}})

    mutations = [{"patch": {"id": target_id, **patch}} for patch in patches]
    if mutations and revision:
        mutations[0]["patch"]["ifRevisionID"] = revision
    return mutations


async def patch_document(
    client: ContentStore,
    document_id: str,
    operations: Sequence[SetOperation | UnsetOperation | AppendOperation | IncOperation],
    release_id: str | None = None,
) -> OperationOutcome:
    """Apply field-level edits to an existing document.

    The patch targets the document the checkpoint found and only applies if
    its revision is unchanged.

    Raises:
        NoChangesRequested: If ``operations`` is empty.
        NotFound: If the document does not exist.
    """
    if not operations:
        raise NoChangesRequested(f"No changes requested for document '{document_id}'")

    target_id = resolve(document_id, release_id, draft_handling=DraftHandling.PRESERVE)

    with store_errors():
        checkpoint = await get_mutation_checkpoint(
            target_id, client.config, partial(lookup_document, client)
        )
        result = await client.mutate(
            _patch_mutations(checkpoint.id, checkpoint.rev, operations),
            return_documents=True,
        )

    logger.info(f"Patched document {checkpoint.id} ({len(operations)} operations)")
    return OperationOutcome(
        message=f"Patched document '{checkpoint.id}'",
        data={
            "document": _final_document(result),
            "transactionId": result.get("transactionId"),
        },
        checkpoints=[checkpoint],
    )


def _final_document(result: dict[str, Any]) -> dict[str, Any] | None:
    """Document as left by the last mutation that returned one."""
    for entry in reversed(result.get("results") or []):
        if entry.get("document"):
            return entry["document"]
    return None


# ============ DOCUMENT ACTIONS ============


async def publish_document(client: ContentStore, document_id: str) -> OperationOutcome:
    """Promote the draft of a document to its published form."""
    published_id = resolve(document_id, False)
    draft_id = draft_id_of(published_id)

    with store_errors():
        checkpoint = await get_mutation_checkpoint(draft_id, client.config, client.get_document)
        result = await dispatch(client, PublishAction(draft_id=draft_id, published_id=published_id))

    return OperationOutcome(
        message=f"Published document '{draft_id}' to '{published_id}'",
        data={
            "publishedId": published_id,
            "draftId": draft_id,
            "transactionId": result.transaction_id,
        },
        checkpoints=[checkpoint],
    )


async def unpublish_document(client: ContentStore, document_id: str) -> OperationOutcome:
    """Move a published document back to drafts."""
    published_id = resolve(document_id, False)
    draft_id = draft_id_of(published_id)

    with store_errors():
        checkpoint = await get_mutation_checkpoint(
            published_id, client.config, client.get_document
        )
        result = await dispatch(
            client, UnpublishAction(draft_id=draft_id, published_id=published_id)
        )

    return OperationOutcome(
        message=f"Unpublished document '{published_id}' (moved to drafts)",
        data={
            "publishedId": published_id,
            "draftId": draft_id,
            "transactionId": result.transaction_id,
        },
        checkpoints=[checkpoint],
    )


async def delete_document(client: ContentStore, document_id: str) -> OperationOutcome:
    """Delete the published document and its draft together."""
    published_id = resolve(document_id, False)
    draft_id = draft_id_of(published_id)

    with store_errors():
        checkpoint = await get_mutation_checkpoint(
            published_id, client.config, partial(lookup_document, client)
        )
        result = await dispatch(
            client, DeleteAction(published_id=published_id, include_drafts=(draft_id,))
        )

    return OperationOutcome(
        message=f"Deleted document '{published_id}' and all its drafts",
        data={"publishedId": published_id, "transactionId": result.transaction_id},
        checkpoints=[checkpoint],
    )


# ============ VERSION ACTIONS ============


async def replace_version(
    client: ContentStore,
    document_id: str,
    release_id: str,
    source_document_id: str,
) -> OperationOutcome:
    """Overwrite a release version with the contents of another document."""
    published_id = resolve(document_id, False)
    version_id = resolve(published_id, release_id)

    with store_errors():
        source = await lookup_document(client, source_document_id)
        if not source:
            raise NotFound(source_document_id, what="Source document")

        checkpoint = await get_mutation_checkpoint(version_id, client.config, client.get_document)
        result = await dispatch(
            client,
            VersionReplaceAction(document={**_copy_content(source), "_id": version_id}),
        )

    return OperationOutcome(
        message=f"Replaced document version '{version_id}' with contents from '{source['_id']}'",
        data={
            "versionId": version_id,
            "sourceId": source["_id"],
            "transactionId": result.transaction_id,
        },
        checkpoints=[checkpoint],
    )


async def discard_version(client: ContentStore, document_id: str, release_id: str) -> OperationOutcome:
    """Remove a document's version from a release."""
    published_id = resolve(document_id, False)
    version_id = resolve(published_id, release_id)

    with store_errors():
        checkpoint = await get_mutation_checkpoint(version_id, client.config, client.get_document)
        result = await dispatch(client, VersionDiscardAction(version_id=version_id))

    return OperationOutcome(
        message=f"Discarded document '{version_id}'",
        data={"versionId": version_id, "transactionId": result.transaction_id},
        checkpoints=[checkpoint],
    )


async def unpublish_version(
    client: ContentStore, document_id: str, release_id: str
) -> OperationOutcome:
    """Mark a version so the published document is removed when the release runs."""
    published_id = resolve(document_id, False)
    version_id = resolve(published_id, release_id)

    with store_errors():
        checkpoint = await get_mutation_checkpoint(version_id, client.config, client.get_document)
        result = await dispatch(
            client, VersionUnpublishAction(version_id=version_id, published_id=published_id)
        )

    return OperationOutcome(
        message=(
            f"Document '{published_id}' will be unpublished when release '{release_id}' is published"
        ),
        data={
            "versionId": version_id,
            "publishedId": published_id,
            "transactionId": result.transaction_id,
        },
        checkpoints=[checkpoint],
    )
