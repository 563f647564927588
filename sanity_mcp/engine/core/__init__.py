"""Engine core module.

This module contains the document identity and transition primitives:
- Id namespaces and resolution
- Document lookup across draft/published
- Checkpoint capture
- Action dispatch
- Bulk operation coordination
"""

from .bulk import MAX_BULK_ITEMS, bulk_operation_message, check_batch_size, process_batch
from .checkpoints import DocumentFetcher, get_creation_checkpoint, get_mutation_checkpoint
from .dispatch import dispatch
from .ids import (
    DRAFTS_PREFIX,
    VERSIONS_PREFIX,
    check_release_id,
    draft_id_of,
    generate_document_id,
    generate_release_id,
    id_kind_of,
    is_draft_id,
    is_published_id,
    is_version_id,
    published_id_of,
    release_id_of,
    resolve,
    version_id_of,
)
from .lookup import lookup_document

__all__ = [
    # Ids
    "DRAFTS_PREFIX",
    "VERSIONS_PREFIX",
    "check_release_id",
    "draft_id_of",
    "generate_document_id",
    "generate_release_id",
    "id_kind_of",
    "is_draft_id",
    "is_published_id",
    "is_version_id",
    "published_id_of",
    "release_id_of",
    "resolve",
    "version_id_of",
    # Lookup
    "lookup_document",
    # Checkpoints
    "DocumentFetcher",
    "get_creation_checkpoint",
    "get_mutation_checkpoint",
    # Dispatch
    "dispatch",
    # Bulk
    "MAX_BULK_ITEMS",
    "bulk_operation_message",
    "check_batch_size",
    "process_batch",
]
