"""Document lookup across the draft/published pair."""

import asyncio
from typing import Any

from ...client import ContentStore
from .ids import DRAFTS_PREFIX, VERSIONS_PREFIX, draft_id_of, published_id_of


async def lookup_document(client: ContentStore, document_id: str) -> dict[str, Any] | None:
    """Fetch "the document" at an id.

    A version id is fetched exactly. Otherwise the draft and published forms
    are fetched concurrently: a draft id prefers the draft, a published id
    prefers the published document, each falling back to the other. The
    returned ``_id`` therefore tells which form was found.

    Returns:
        The document, or None when neither form exists.
    """
    if document_id.startswith(VERSIONS_PREFIX):
        published_id_of(document_id)
        return await client.get_document(document_id)

    published_id = published_id_of(document_id)
    draft, published = await asyncio.gather(
        client.get_document(draft_id_of(published_id)),
        client.get_document(published_id),
    )

    if document_id.startswith(DRAFTS_PREFIX):
        return draft or published
    return published or draft
