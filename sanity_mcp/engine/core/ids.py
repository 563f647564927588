"""Document id namespaces and resolution.

A document exists under three id forms:
    - published: ``abc``
    - draft:     ``drafts.abc``
    - version:   ``versions.<releaseId>.abc``

The published id is the stable identity of the document across all of them.
Everything in this module is pure.
"""

import re
import uuid

from ...errors import InvalidIdKind
from ...models import DraftHandling, IdKind

DRAFTS_PREFIX = "drafts."
VERSIONS_PREFIX = "versions."

MAX_ID_LENGTH = 128
_ID_CHARS = re.compile(r"^[A-Za-z0-9._-]+$")


def _check_chars(document_id: str) -> None:
    if not document_id:
        raise InvalidIdKind(document_id, "id is empty")
    if len(document_id) > MAX_ID_LENGTH:
        raise InvalidIdKind(document_id, f"longer than {MAX_ID_LENGTH} characters")
    if not _ID_CHARS.match(document_id):
        raise InvalidIdKind(document_id, "only a-z, A-Z, 0-9, '.', '_' and '-' are allowed")


def _split_version(document_id: str) -> tuple[str, str]:
    """Split ``versions.<release>.<published>`` into (release, published)."""
    rest = document_id[len(VERSIONS_PREFIX) :]
    release_id, sep, published_id = rest.partition(".")
    if not release_id:
        raise InvalidIdKind(document_id, "version id has an empty release id")
    if not sep or not published_id:
        raise InvalidIdKind(document_id, "version id has no document id after the release id")
    return release_id, published_id


def id_kind_of(document_id: str) -> IdKind:
    """Return the namespace of an id, validating it on the way."""
    published_id_of(document_id)
    if document_id.startswith(VERSIONS_PREFIX):
        return IdKind.VERSION
    if document_id.startswith(DRAFTS_PREFIX):
        return IdKind.DRAFT
    return IdKind.PUBLISHED


def is_version_id(document_id: str) -> bool:
    return id_kind_of(document_id) == IdKind.VERSION


def is_draft_id(document_id: str) -> bool:
    return id_kind_of(document_id) == IdKind.DRAFT


def is_published_id(document_id: str) -> bool:
    return id_kind_of(document_id) == IdKind.PUBLISHED


def published_id_of(document_id: str) -> str:
    """Strip a ``drafts.`` or ``versions.<release>.`` prefix.

    Raises:
        InvalidIdKind: If the id is malformed or has an empty base id.
    """
    _check_chars(document_id)

    if document_id.startswith(VERSIONS_PREFIX):
        _, published_id = _split_version(document_id)
    elif document_id.startswith(DRAFTS_PREFIX):
        published_id = document_id[len(DRAFTS_PREFIX) :]
        if not published_id:
            raise InvalidIdKind(document_id, "draft id has no document id after the prefix")
    else:
        published_id = document_id

    if published_id.startswith(".") or published_id.endswith("."):
        raise InvalidIdKind(document_id, "document id has an empty segment")
    return published_id


def release_id_of(document_id: str) -> str:
    """Return the release embedded in a version id.

    Raises:
        InvalidIdKind: If the id is not a version id.
    """
    _check_chars(document_id)
    if not document_id.startswith(VERSIONS_PREFIX):
        raise InvalidIdKind(document_id, "not a version id")
    release_id, _ = _split_version(document_id)
    return release_id


def check_release_id(release_id: str) -> str:
    """Validate a release id for use inside a version id.

    Raises:
        InvalidIdKind: If the release id is empty or contains a '.'.
    """
    if "." in release_id:
        raise InvalidIdKind(release_id, "release id cannot contain '.'")
    _check_chars(release_id)
    return release_id


def draft_id_of(published_id: str) -> str:
    return f"{DRAFTS_PREFIX}{published_id}"


def version_id_of(published_id: str, release_id: str) -> str:
    return f"{VERSIONS_PREFIX}{release_id}.{published_id}"


def resolve(
    raw_id: str,
    release_id: str | bool | None = None,
    draft_handling: DraftHandling = DraftHandling.PUBLISHED,
) -> str:
    """Resolve a caller-supplied id to the id an operation should target.

    Precedence, first match wins:
        1. ``release_id is False``: the published id, ignoring any prefix.
        2. ``raw_id`` is a version id: that version. Its own release beats
           any ``release_id`` passed in.
        3. ``release_id`` is a string: the version in that release.
        4. Otherwise the published id, or the draft id unchanged when
           ``draft_handling`` is PRESERVE.

    Raises:
        InvalidIdKind: If ``raw_id`` is malformed.
    """
    published_id = published_id_of(raw_id)

    if release_id is False:
        return published_id

    if raw_id.startswith(VERSIONS_PREFIX):
        return version_id_of(published_id, release_id_of(raw_id))

    if isinstance(release_id, str) and release_id:
        return version_id_of(published_id, check_release_id(release_id))

    if draft_handling == DraftHandling.PRESERVE and raw_id.startswith(DRAFTS_PREFIX):
        return raw_id
    return published_id


def generate_document_id() -> str:
    """Fresh published id for a new document."""
    return str(uuid.uuid4())


def generate_release_id() -> str:
    """Fresh release id: 'r' followed by eight hex characters."""
    return f"r{uuid.uuid4().hex[:8]}"
