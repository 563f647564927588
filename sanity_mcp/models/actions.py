"""Actions sent to the content store's actions endpoint.

Document actions are the variants of one closed union discriminated by
``action_type``; release actions form a second closed union of the same
shape. ``to_wire()`` renders the request body entry, deriving the wire
actionType from the variant tag.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Literal

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field

from .enums import ActionType, ReleaseActionType, ReleaseType

ACTION_TYPE_PREFIX = "sanity.action.document."
RELEASE_ACTION_TYPE_PREFIX = "sanity.action.release."


class _ActionBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    action_type: ActionType

    def wire_action_type(self) -> str:
        return f"{ACTION_TYPE_PREFIX}{self.action_type.value}"

    def _wire_fields(self) -> dict[str, Any]:
        raise NotImplementedError

    def to_wire(self) -> dict[str, Any]:
        """Render the action as an entry of the actions request body."""
        return {"actionType": self.wire_action_type(), **self._wire_fields()}


class PublishAction(_ActionBase):
    """Promote a draft to the published document."""

    action_type: Literal[ActionType.PUBLISH] = ActionType.PUBLISH
    draft_id: str
    published_id: str

    def _wire_fields(self) -> dict[str, Any]:
        return {"draftId": self.draft_id, "publishedId": self.published_id}


class UnpublishAction(_ActionBase):
    """Demote the published document back to a draft."""

    action_type: Literal[ActionType.UNPUBLISH] = ActionType.UNPUBLISH
    draft_id: str
    published_id: str

    def _wire_fields(self) -> dict[str, Any]:
        return {"draftId": self.draft_id, "publishedId": self.published_id}


class DeleteAction(_ActionBase):
    """Remove the published document and the listed drafts together."""

    action_type: Literal[ActionType.DELETE] = ActionType.DELETE
    published_id: str
    include_drafts: tuple[str, ...] = ()
    purge: bool = False

    def _wire_fields(self) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "publishedId": self.published_id,
            "includeDrafts": list(self.include_drafts),
        }
        if self.purge:
            fields["purge"] = True
        return fields


class VersionReplaceAction(_ActionBase):
    """Overwrite a version's content; ``document["_id"]`` is the version id."""

    action_type: Literal[ActionType.VERSION_REPLACE] = ActionType.VERSION_REPLACE
    document: dict[str, Any]

    @property
    def version_id(self) -> str:
        return self.document["_id"]

    def _wire_fields(self) -> dict[str, Any]:
        return {"document": dict(self.document)}


class VersionDiscardAction(_ActionBase):
    """Remove a version from its release."""

    action_type: Literal[ActionType.VERSION_DISCARD] = ActionType.VERSION_DISCARD
    version_id: str
    purge: bool = False

    def _wire_fields(self) -> dict[str, Any]:
        fields: dict[str, Any] = {"versionId": self.version_id}
        if self.purge:
            fields["purge"] = True
        return fields


class VersionUnpublishAction(_ActionBase):
    """Mark a version so that publishing its release removes the published document.

    The version document itself is left as it is.
    """

    action_type: Literal[ActionType.VERSION_UNPUBLISH] = ActionType.VERSION_UNPUBLISH
    version_id: str
    published_id: str

    def _wire_fields(self) -> dict[str, Any]:
        return {"versionId": self.version_id, "publishedId": self.published_id}


Action = Annotated[
    PublishAction
    | UnpublishAction
    | DeleteAction
    | VersionReplaceAction
    | VersionDiscardAction
    | VersionUnpublishAction,
    Field(discriminator="action_type"),
]


# ============ RELEASE ACTIONS ============


def format_timestamp(value: datetime) -> str:
    """UTC timestamp in the store's ``2025-04-04T18:36:00.000Z`` form."""
    utc = value.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


class ReleaseMetadata(BaseModel):
    """Descriptive fields of a release. Unset fields are left out of the wire form."""

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    description: str | None = None
    release_type: ReleaseType | None = None
    intended_publish_at: AwareDatetime | None = None

    def to_wire(self) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        if self.title is not None:
            fields["title"] = self.title
        if self.description is not None:
            fields["description"] = self.description
        if self.release_type is not None:
            fields["releaseType"] = self.release_type.value
        if self.intended_publish_at is not None:
            fields["intendedPublishAt"] = format_timestamp(self.intended_publish_at)
        return fields


class _ReleaseActionBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    action_type: ReleaseActionType
    release_id: str

    def wire_action_type(self) -> str:
        return f"{RELEASE_ACTION_TYPE_PREFIX}{self.action_type.value}"

    def _wire_fields(self) -> dict[str, Any]:
        return {}

    def to_wire(self) -> dict[str, Any]:
        """Render the action as an entry of the actions request body."""
        return {
            "actionType": self.wire_action_type(),
            "releaseId": self.release_id,
            **self._wire_fields(),
        }


class CreateReleaseAction(_ReleaseActionBase):
    """Create an empty release with its metadata."""

    action_type: Literal[ReleaseActionType.CREATE] = ReleaseActionType.CREATE
    metadata: ReleaseMetadata

    def _wire_fields(self) -> dict[str, Any]:
        return {"metadata": self.metadata.to_wire()}


class EditReleaseAction(_ReleaseActionBase):
    """Change some metadata fields of a release, leaving the others as they are."""

    action_type: Literal[ReleaseActionType.EDIT] = ReleaseActionType.EDIT
    metadata: ReleaseMetadata

    def _wire_fields(self) -> dict[str, Any]:
        changes = {f"metadata.{key}": value for key, value in self.metadata.to_wire().items()}
        return {"patch": {"set": changes}}


class ScheduleReleaseAction(_ReleaseActionBase):
    """Publish the release automatically at ``publish_at``."""

    action_type: Literal[ReleaseActionType.SCHEDULE] = ReleaseActionType.SCHEDULE
    publish_at: AwareDatetime

    def _wire_fields(self) -> dict[str, Any]:
        return {"publishAt": format_timestamp(self.publish_at)}


class UnscheduleReleaseAction(_ReleaseActionBase):
    action_type: Literal[ReleaseActionType.UNSCHEDULE] = ReleaseActionType.UNSCHEDULE


class PublishReleaseAction(_ReleaseActionBase):
    """Publish every version in the release in one transaction."""

    action_type: Literal[ReleaseActionType.PUBLISH] = ReleaseActionType.PUBLISH


class ArchiveReleaseAction(_ReleaseActionBase):
    action_type: Literal[ReleaseActionType.ARCHIVE] = ReleaseActionType.ARCHIVE


class UnarchiveReleaseAction(_ReleaseActionBase):
    action_type: Literal[ReleaseActionType.UNARCHIVE] = ReleaseActionType.UNARCHIVE


class DeleteReleaseAction(_ReleaseActionBase):
    """Remove an archived or published release permanently."""

    action_type: Literal[ReleaseActionType.DELETE] = ReleaseActionType.DELETE


ReleaseAction = Annotated[
    CreateReleaseAction
    | EditReleaseAction
    | ScheduleReleaseAction
    | UnscheduleReleaseAction
    | PublishReleaseAction
    | ArchiveReleaseAction
    | UnarchiveReleaseAction
    | DeleteReleaseAction,
    Field(discriminator="action_type"),
]


class ActionResult(BaseModel):
    """Acknowledgement returned by the actions endpoint."""

    transaction_id: str | None = Field(default=None, description="Transaction that applied the action")
