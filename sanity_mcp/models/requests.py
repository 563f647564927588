"""Request models (Pydantic *Params classes) for the Sanity MCP tools."""

from typing import Annotated, Any, Literal

from pydantic import AwareDatetime, BaseModel, Field

from .enums import DraftHandling, PatchOp, ReleaseActionType, ReleaseType

# ============ SHARED ============


class ResourceParams(BaseModel):
    """Dataset to target instead of the configured default."""

    project_id: str = Field(..., min_length=1, description="Project ID")
    dataset: str = Field(..., min_length=1, description="Dataset name")


class ToolParams(BaseModel):
    """Fields accepted by every tool."""

    resource: ResourceParams | None = Field(
        default=None, description="Optional dataset override for this call"
    )


# ============ DOCUMENT PARAMS ============


class GetDocumentParams(ToolParams):
    """Parameters for get_document tool."""

    id: str = Field(..., description="Document ID in any namespace")
    release_id: str | None = Field(default=None, description="Read the version in this release")
    draft_handling: DraftHandling = Field(
        default=DraftHandling.PRESERVE,
        description="Whether a draft id is read as the draft or normalized to the published id",
    )


class CreateDocumentParams(ToolParams):
    """Parameters for create_document tool."""

    type: str = Field(..., min_length=1, description="The document type")
    content: dict[str, Any] = Field(default_factory=dict, description="Initial document fields")
    release_id: str | None = Field(
        default=None,
        description="Create the document as a version in this release instead of as a draft",
    )


class SetOperation(BaseModel):
    op: Literal[PatchOp.SET]
    path: str = Field(..., min_length=1, description='Field path, e.g. "title" or "author.name"')
    value: Any = Field(..., description="Value replacing the field")


class UnsetOperation(BaseModel):
    op: Literal[PatchOp.UNSET]
    path: str = Field(..., min_length=1, description="Field path to remove")


class AppendOperation(BaseModel):
    op: Literal[PatchOp.APPEND]
    path: str = Field(..., min_length=1, description="Array field path")
    items: list[Any] = Field(..., min_length=1, description="Items appended to the array")


class IncOperation(BaseModel):
    op: Literal[PatchOp.INC]
    path: str = Field(..., min_length=1, description="Numeric field path")
    amount: float = Field(default=1, description="Amount added to the field")


PatchOperation = Annotated[
    SetOperation | UnsetOperation | AppendOperation | IncOperation,
    Field(discriminator="op"),
]


class PatchDocumentParams(ToolParams):
    """Parameters for patch_document tool."""

    id: str = Field(..., description="Document ID to patch")
    operations: list[PatchOperation] = Field(
        default_factory=list, description="Patch operations applied in order"
    )
    release_id: str | None = Field(default=None, description="Patch the version in this release")


class DocumentIdParams(ToolParams):
    """Parameters for publish_document, unpublish_document and delete_document tools."""

    id: str = Field(..., description="Document ID in any namespace")


# ============ VERSION PARAMS ============


class VersionParams(ToolParams):
    """Parameters for create_version, version_discard_document and version_unpublish_document."""

    id: str = Field(..., description="Document ID in any namespace")
    release_id: str = Field(..., min_length=1, description="Release that holds the version")


class VersionReplaceParams(VersionParams):
    """Parameters for version_replace_document tool."""

    source_document_id: str = Field(..., description="Document to copy contents from")


# ============ BULK PARAMS ============


class BulkDocumentParams(ToolParams):
    """Parameters for publish_documents, unpublish_documents and delete_documents."""

    ids: list[str] = Field(..., min_length=1, description="Document IDs, processed concurrently")


class BulkVersionParams(BulkDocumentParams):
    """Parameters for create_versions, discard_versions and unpublish_versions."""

    release_id: str = Field(..., min_length=1, description="Release that holds the versions")


# ============ RELEASE PARAMS ============


class CreateReleaseParams(ToolParams):
    """Parameters for create_release tool."""

    title: str = Field(..., min_length=1, description='Release title, e.g. "Spring launch"')
    description: str | None = Field(default=None, description="Release description")
    release_type: ReleaseType = Field(
        default=ReleaseType.UNDECIDED, description="asap, undecided or scheduled"
    )
    intended_publish_at: AwareDatetime | None = Field(
        default=None, description="When the release is meant to be published (informational)"
    )
    release_id: str | None = Field(default=None, description="Release id; generated when omitted")


class EditReleaseParams(ToolParams):
    """Parameters for edit_release tool. Omitted fields are left unchanged."""

    release_id: str = Field(..., min_length=1, description="Release to edit")
    title: str | None = Field(default=None, min_length=1, description="New title")
    description: str | None = Field(default=None, description="New description")
    release_type: ReleaseType | None = Field(default=None, description="New release type")
    intended_publish_at: AwareDatetime | None = Field(
        default=None, description="New intended publish time (informational)"
    )


class ScheduleReleaseParams(ToolParams):
    """Parameters for schedule_release tool."""

    release_id: str = Field(..., min_length=1, description="Release to schedule")
    publish_at: AwareDatetime = Field(
        ..., description="ISO 8601 time with offset, e.g. 2025-04-04T18:36:00Z"
    )


class ReleaseActionParams(ToolParams):
    """Parameters for release_action tool."""

    release_id: str = Field(..., min_length=1, description="Release to act on")
    action: Literal[
        ReleaseActionType.PUBLISH,
        ReleaseActionType.ARCHIVE,
        ReleaseActionType.UNARCHIVE,
        ReleaseActionType.UNSCHEDULE,
        ReleaseActionType.DELETE,
    ] = Field(..., description="publish, archive, unarchive, unschedule or delete")
