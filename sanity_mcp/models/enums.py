"""Enumeration types for the Sanity MCP Server."""

from enum import StrEnum


class ToolName(StrEnum):
    """Available MCP tools."""

    # Documents
    GET_DOCUMENT = "get_document"
    CREATE_DOCUMENT = "create_document"
    PATCH_DOCUMENT = "patch_document"
    PUBLISH_DOCUMENT = "publish_document"
    UNPUBLISH_DOCUMENT = "unpublish_document"
    DELETE_DOCUMENT = "delete_document"
    # Release versions
    CREATE_VERSION = "create_version"
    VERSION_REPLACE_DOCUMENT = "version_replace_document"
    VERSION_DISCARD_DOCUMENT = "version_discard_document"
    VERSION_UNPUBLISH_DOCUMENT = "version_unpublish_document"
    # Bulk
    PUBLISH_DOCUMENTS = "publish_documents"
    UNPUBLISH_DOCUMENTS = "unpublish_documents"
    DELETE_DOCUMENTS = "delete_documents"
    CREATE_VERSIONS = "create_versions"
    DISCARD_VERSIONS = "discard_versions"
    UNPUBLISH_VERSIONS = "unpublish_versions"
    # Releases
    CREATE_RELEASE = "create_release"
    EDIT_RELEASE = "edit_release"
    SCHEDULE_RELEASE = "schedule_release"
    RELEASE_ACTION = "release_action"


class IdKind(StrEnum):
    """Namespace a document id lives in."""

    PUBLISHED = "published"
    DRAFT = "draft"
    VERSION = "version"


class DraftHandling(StrEnum):
    """How resolve() treats a draft id when no release applies.

    PUBLISHED normalizes ``drafts.abc`` to ``abc``; PRESERVE keeps it as is.
    """

    PUBLISHED = "published"
    PRESERVE = "preserve"


class ActionType(StrEnum):
    """Document state transitions understood by the actions endpoint."""

    PUBLISH = "publish"
    UNPUBLISH = "unpublish"
    DELETE = "delete"
    VERSION_REPLACE = "version.replace"
    VERSION_DISCARD = "version.discard"
    VERSION_UNPUBLISH = "version.unpublish"


class CheckpointType(StrEnum):
    """Kind of checkpoint captured for an operation."""

    CREATE = "create"
    MUTATE = "mutate"


class PatchOp(StrEnum):
    """Field-level patch operations."""

    SET = "set"
    UNSET = "unset"
    APPEND = "append"
    INC = "inc"


class ReleaseActionType(StrEnum):
    """Release lifecycle transitions understood by the actions endpoint."""

    CREATE = "create"
    EDIT = "edit"
    SCHEDULE = "schedule"
    UNSCHEDULE = "unschedule"
    PUBLISH = "publish"
    ARCHIVE = "archive"
    UNARCHIVE = "unarchive"
    DELETE = "delete"


class ReleaseType(StrEnum):
    """When a release is meant to go out."""

    ASAP = "asap"
    UNDECIDED = "undecided"
    SCHEDULED = "scheduled"
