"""Checkpoint models returned alongside mutating operations."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from .enums import CheckpointType


class _CheckpointBase(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    project_id: str = Field(..., alias="projectId", description="Project of the dataset")
    dataset: str = Field(..., description="Dataset holding the document")
    id: str = Field(..., alias="_id", description="Document id the checkpoint refers to")


class CreationCheckpoint(_CheckpointBase):
    """Intent to create a document; no prior revision is expected."""

    type: Literal[CheckpointType.CREATE] = CheckpointType.CREATE


class MutationCheckpoint(_CheckpointBase):
    """Revision of a document captured right before it was mutated."""

    type: Literal[CheckpointType.MUTATE] = CheckpointType.MUTATE
    rev: str = Field(..., alias="_rev", description="Revision seen before the mutation")


Checkpoint = Annotated[CreationCheckpoint | MutationCheckpoint, Field(discriminator="type")]
