"""Result models for operations, bulk calls and tool responses."""

from typing import Any

from pydantic import BaseModel, Field

from .checkpoints import Checkpoint

# ============ BULK MODELS ============


class ItemOutcome(BaseModel):
    """Outcome of one item of a bulk operation, at the item's input index."""

    success: bool = Field(..., description="Whether the item's operation succeeded")
    item: Any = Field(default=None, description="Input item this outcome belongs to")
    payload: Any = Field(default=None, description="Operation result when successful")
    error: str | None = Field(default=None, description="Error message when failed")


class BulkSummary(BaseModel):
    """Aggregate counts for a bulk operation."""

    total: int = Field(default=0, ge=0, description="Items processed")
    successful: int = Field(default=0, ge=0, description="Items that succeeded")
    failed: int = Field(default=0, ge=0, description="Items that failed")


class BulkResult(BaseModel):
    """Ordered per-item outcomes plus summary counts."""

    results: list[ItemOutcome] = Field(default_factory=list)
    summary: BulkSummary = Field(default_factory=BulkSummary)

    @property
    def successful_payloads(self) -> list[Any]:
        return [outcome.payload for outcome in self.results if outcome.success]

    @property
    def failures(self) -> list[ItemOutcome]:
        return [outcome for outcome in self.results if not outcome.success]


# ============ OPERATION MODELS ============


class OperationOutcome(BaseModel):
    """Result of one document operation before it is shaped into a tool response."""

    message: str = Field(..., description="Human-readable status message")
    data: dict[str, Any] | None = Field(default=None, description="Structured result data")
    checkpoints: list[Checkpoint] = Field(
        default_factory=list, description="Checkpoints captured by the operation"
    )


# ============ TOOL RESPONSE ============


class ToolResult(BaseModel):
    """Result of a tool call, as handed to the transport layer."""

    message: str = Field(..., description="Human-readable status message")
    data: dict[str, Any] | None = Field(default=None, description="Structured result data")
    checkpoints: list[Checkpoint] | None = Field(
        default=None, description="Checkpoints captured before mutating calls"
    )
    is_error: bool = Field(default=False, description="True for failure payloads")

    @classmethod
    def success(
        cls,
        message: str,
        data: dict[str, Any] | None = None,
        checkpoints: list | None = None,
    ) -> "ToolResult":
        return cls(message=message, data=data, checkpoints=checkpoints or None)

    @classmethod
    def failure(cls, message: str) -> "ToolResult":
        return cls(message=message, is_error=True)

    @classmethod
    def from_outcome(cls, outcome: OperationOutcome) -> "ToolResult":
        return cls.success(outcome.message, outcome.data, outcome.checkpoints)

    def to_payload(self) -> dict[str, Any]:
        """Render the success or failure payload.

        Success: ``{message, data?, checkpoints?}``. Failure: ``{message}``.
        """
        if self.is_error:
            return {"message": self.message}

        payload: dict[str, Any] = {"message": self.message}
        if self.data is not None:
            payload["data"] = self.data
        if self.checkpoints:
            payload["checkpoints"] = [
                checkpoint.model_dump(mode="json", by_alias=True) for checkpoint in self.checkpoints
            ]
        return payload
