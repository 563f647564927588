"""Pydantic models for Sanity MCP Server request/response schemas.

This module re-exports all models. Import from submodules directly for
cleaner imports:

    from sanity_mcp.models.enums import ToolName, IdKind
    from sanity_mcp.models.actions import PublishAction
"""

# ============ ACTION MODELS ============
from .actions import (
    ACTION_TYPE_PREFIX,
    RELEASE_ACTION_TYPE_PREFIX,
    Action,
    ActionResult,
    ArchiveReleaseAction,
    CreateReleaseAction,
    DeleteAction,
    DeleteReleaseAction,
    EditReleaseAction,
    PublishAction,
    PublishReleaseAction,
    ReleaseAction,
    ReleaseMetadata,
    ScheduleReleaseAction,
    UnarchiveReleaseAction,
    UnpublishAction,
    UnscheduleReleaseAction,
    VersionDiscardAction,
    VersionReplaceAction,
    VersionUnpublishAction,
    format_timestamp,
)

# ============ CHECKPOINT MODELS ============
from .checkpoints import Checkpoint, CreationCheckpoint, MutationCheckpoint

# ============ ENUMS ============
from .enums import (
    ActionType,
    CheckpointType,
    DraftHandling,
    IdKind,
    PatchOp,
    ReleaseActionType,
    ReleaseType,
    ToolName,
)

# ============ REQUEST MODELS ============
from .requests import (
    AppendOperation,
    BulkDocumentParams,
    BulkVersionParams,
    CreateDocumentParams,
    CreateReleaseParams,
    DocumentIdParams,
    EditReleaseParams,
    GetDocumentParams,
    IncOperation,
    PatchDocumentParams,
    PatchOperation,
    ReleaseActionParams,
    ResourceParams,
    ScheduleReleaseParams,
    SetOperation,
    ToolParams,
    UnsetOperation,
    VersionParams,
    VersionReplaceParams,
)

# ============ RESPONSE MODELS ============
from .responses import HealthResponse, ToolCallParams

# ============ RESULT MODELS ============
from .results import (
    BulkResult,
    BulkSummary,
    ItemOutcome,
    OperationOutcome,
    ToolResult,
)

__all__ = [
    # Enums
    "ActionType",
    "CheckpointType",
    "DraftHandling",
    "IdKind",
    "PatchOp",
    "ReleaseActionType",
    "ReleaseType",
    "ToolName",
    # Actions
    "ACTION_TYPE_PREFIX",
    "Action",
    "ActionResult",
    "DeleteAction",
    "PublishAction",
    "UnpublishAction",
    "VersionDiscardAction",
    "VersionReplaceAction",
    "VersionUnpublishAction",
    # Release actions
    "RELEASE_ACTION_TYPE_PREFIX",
    "ArchiveReleaseAction",
    "CreateReleaseAction",
    "DeleteReleaseAction",
    "EditReleaseAction",
    "PublishReleaseAction",
    "ReleaseAction",
    "ReleaseMetadata",
    "ScheduleReleaseAction",
    "UnarchiveReleaseAction",
    "UnscheduleReleaseAction",
    "format_timestamp",
    # Checkpoints
    "Checkpoint",
    "CreationCheckpoint",
    "MutationCheckpoint",
    # Request models
    "AppendOperation",
    "BulkDocumentParams",
    "BulkVersionParams",
    "CreateDocumentParams",
    "CreateReleaseParams",
    "DocumentIdParams",
    "EditReleaseParams",
    "GetDocumentParams",
    "IncOperation",
    "PatchDocumentParams",
    "PatchOperation",
    "ReleaseActionParams",
    "ResourceParams",
    "ScheduleReleaseParams",
    "SetOperation",
    "ToolParams",
    "UnsetOperation",
    "VersionParams",
    "VersionReplaceParams",
    # Responses
    "HealthResponse",
    "ToolCallParams",
    # Results
    "BulkResult",
    "BulkSummary",
    "ItemOutcome",
    "OperationOutcome",
    "ToolResult",
]
