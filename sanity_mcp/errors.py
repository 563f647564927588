"""Exception hierarchy for the Sanity MCP tools.

Tool-level failures inherit from ContentToolError so the tool engine can turn
them into failure payloads. ContentStoreError is raised by the HTTP client and
is translated into ExternalActionFailure by the document operations.
"""

from typing import Any


class ContentToolError(Exception):
    """Base exception for errors reported back to the tool caller."""


class InvalidIdKind(ContentToolError):
    """Raised when an id does not parse as a known namespace plus a base id."""

    def __init__(self, document_id: str, reason: str = "not a valid document id"):
        self.document_id = document_id
        super().__init__(f"Invalid document id '{document_id}': {reason}")


class NotFound(ContentToolError):
    """Raised when a document, or a document an action refers to, is missing."""

    def __init__(self, document_id: str, what: str = "Document"):
        self.document_id = document_id
        super().__init__(f"{what} '{document_id}' not found")


class NoChangesRequested(ContentToolError):
    """Raised when an edit operation carries an empty diff."""


class ExternalActionFailure(ContentToolError):
    """Opaque failure reported by the content store."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class BatchItemFailure(ContentToolError):
    """Failure scoped to one item of a bulk operation.

    Never escalated: the bulk coordinator records it in the item's outcome.
    """

    def __init__(self, index: int, item: Any, message: str):
        self.index = index
        self.item = item
        super().__init__(message)


class InvalidParameter(ContentToolError):
    """Raised when tool input is rejected before any remote call."""


class BatchTooLarge(InvalidParameter):
    """Raised when a bulk call exceeds the configured item cap."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(f"Invalid parameter: at most {limit} items per call, got {count}")


class ConfigurationError(ContentToolError):
    """Raised when the client lacks the project id or dataset it needs."""


class ContentStoreError(Exception):
    """HTTP or transport failure from the content store client.

    Carries the status code and decoded body when the store answered at all.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        payload: Any = None,
    ):
        self.status_code = status_code
        self.payload = payload
        super().__init__(message)
