"""Shared fixtures: an in-memory content store emulating action semantics."""

import copy
import itertools
from dataclasses import replace
from typing import Any

import pytest

from sanity_mcp.client import ClientConfig
from sanity_mcp.config import Settings
from sanity_mcp.engine import ToolEngine
from sanity_mcp.errors import ContentStoreError
from sanity_mcp.models import (
    ActionResult,
    ArchiveReleaseAction,
    CreateReleaseAction,
    DeleteAction,
    DeleteReleaseAction,
    EditReleaseAction,
    PublishAction,
    PublishReleaseAction,
    ScheduleReleaseAction,
    UnarchiveReleaseAction,
    UnpublishAction,
    UnscheduleReleaseAction,
    VersionDiscardAction,
    VersionReplaceAction,
    VersionUnpublishAction,
)

PROJECT_ID = "test-project"
DATASET = "test-dataset"


def _set_path(document: dict[str, Any], path: str, value: Any) -> None:
    *parents, leaf = path.split(".")
    target = document
    for key in parents:
        target = target.setdefault(key, {})
    target[leaf] = value


def _get_path(document: dict[str, Any], path: str, default: Any = None) -> Any:
    target: Any = document
    for key in path.split("."):
        if not isinstance(target, dict) or key not in target:
            return default
        target = target[key]
    return target


def _unset_path(document: dict[str, Any], path: str) -> None:
    *parents, leaf = path.split(".")
    target: Any = document
    for key in parents:
        target = target.get(key)
        if not isinstance(target, dict):
            return
    target.pop(leaf, None)


class FakeContentStore:
    """ContentStore double holding documents in a dict.

    Actions follow the store's rules closely enough for state-transition
    tests: publish moves the draft to the published id, unpublish moves it
    back, delete removes the published document with the listed drafts, and
    version.unpublish only records a marker on the version.

    Releases move through active, scheduled, archived and published states.
    Publishing a release promotes its versions and applies unpublish markers.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        documents: dict[str, dict[str, Any]] | None = None,
        _shared: dict[str, Any] | None = None,
    ):
        self.config = config or ClientConfig(project_id=PROJECT_ID, dataset=DATASET)
        if _shared is None:
            _shared = {
                "documents": documents if documents is not None else {},
                "actions": [],
                "mutations": [],
                "fetched": [],
                "unpublish_markers": {},
                "releases": {},
                "counter": itertools.count(1),
                "action_error": None,
            }
        self._shared = _shared

    # ---- inspection helpers ----

    @property
    def documents(self) -> dict[str, dict[str, Any]]:
        return self._shared["documents"]

    @property
    def actions(self) -> list[Any]:
        return self._shared["actions"]

    @property
    def mutations(self) -> list[list[dict[str, Any]]]:
        return self._shared["mutations"]

    @property
    def fetched(self) -> list[tuple[str, str]]:
        return self._shared["fetched"]

    @property
    def releases(self) -> dict[str, dict[str, Any]]:
        return self._shared["releases"]

    @property
    def unpublish_markers(self) -> dict[str, str]:
        return self._shared["unpublish_markers"]

    def fail_actions_with(self, error: ContentStoreError | None) -> None:
        self._shared["action_error"] = error

    def add(self, document_id: str, **fields: Any) -> dict[str, Any]:
        document = {"_id": document_id, "_type": "post", "_rev": self._next_rev(), **fields}
        self.documents[document_id] = document
        return copy.deepcopy(document)

    def _next_rev(self) -> str:
        return f"rev-{next(self._shared['counter'])}"

    def _transaction(self) -> str:
        return f"tx-{next(self._shared['counter'])}"

    def _store(self, document_id: str, source: dict[str, Any]) -> dict[str, Any]:
        document = {**copy.deepcopy(source), "_id": document_id, "_rev": self._next_rev()}
        self.documents[document_id] = document
        return document

    # ---- ContentStore protocol ----

    def with_config(self, project_id: str | None = None, dataset: str | None = None):
        config = replace(
            self.config,
            project_id=project_id or self.config.project_id,
            dataset=dataset or self.config.dataset,
        )
        return FakeContentStore(config=config, _shared=self._shared)

    async def get_document(self, document_id: str) -> dict[str, Any] | None:
        self.fetched.append((self.config.dataset, document_id))
        document = self.documents.get(document_id)
        return copy.deepcopy(document) if document else None

    async def perform_action(self, action) -> ActionResult:
        if self._shared["action_error"] is not None:
            raise self._shared["action_error"]
        self.actions.append(action)

        if isinstance(action, PublishAction):
            draft = self.documents.pop(action.draft_id, None)
            if draft is None:
                raise ContentStoreError("Cannot publish: draft does not exist", status_code=409)
            self._store(action.published_id, draft)
        elif isinstance(action, UnpublishAction):
            published = self.documents.pop(action.published_id, None)
            if published is None:
                raise ContentStoreError("Cannot unpublish: not published", status_code=409)
            if action.draft_id not in self.documents:
                self._store(action.draft_id, published)
        elif isinstance(action, DeleteAction):
            self.documents.pop(action.published_id, None)
            for draft_id in action.include_drafts:
                self.documents.pop(draft_id, None)
        elif isinstance(action, VersionReplaceAction):
            self._store(action.version_id, action.document)
        elif isinstance(action, VersionDiscardAction):
            if self.documents.pop(action.version_id, None) is None:
                raise ContentStoreError("Version does not exist", status_code=409)
        elif isinstance(action, VersionUnpublishAction):
            if action.version_id not in self.documents:
                raise ContentStoreError("Version does not exist", status_code=409)
            self.unpublish_markers[action.version_id] = action.published_id
        else:
            self._perform_release_action(action)

        return ActionResult(transaction_id=self._transaction())

    def _release(self, release_id: str, *states: str) -> dict[str, Any]:
        release = self.releases.get(release_id)
        if release is None:
            raise ContentStoreError(f"Release '{release_id}' not found", status_code=404)
        if states and release["state"] not in states:
            raise ContentStoreError(
                f"Release '{release_id}' is {release['state']}", status_code=409
            )
        return release

    def _perform_release_action(self, action) -> None:
        release_id = action.release_id
        if isinstance(action, CreateReleaseAction):
            if release_id in self.releases:
                raise ContentStoreError("Release already exists", status_code=409)
            self.releases[release_id] = {
                "metadata": action.metadata.to_wire(),
                "state": "active",
            }
        elif isinstance(action, EditReleaseAction):
            release = self._release(release_id)
            for path, value in action.to_wire()["patch"]["set"].items():
                _set_path(release, path, value)
        elif isinstance(action, ScheduleReleaseAction):
            release = self._release(release_id, "active")
            release.update(state="scheduled", publishAt=action.to_wire()["publishAt"])
        elif isinstance(action, UnscheduleReleaseAction):
            release = self._release(release_id, "scheduled")
            release["state"] = "active"
            release.pop("publishAt", None)
        elif isinstance(action, PublishReleaseAction):
            release = self._release(release_id, "active")
            prefix = f"versions.{release_id}."
            for version_id in [key for key in self.documents if key.startswith(prefix)]:
                published_id = version_id.removeprefix(prefix)
                version = self.documents.pop(version_id)
                if self.unpublish_markers.pop(version_id, None):
                    self.documents.pop(published_id, None)
                else:
                    self._store(published_id, version)
            release["state"] = "published"
        elif isinstance(action, ArchiveReleaseAction):
            self._release(release_id, "active")["state"] = "archived"
        elif isinstance(action, UnarchiveReleaseAction):
            self._release(release_id, "archived")["state"] = "active"
        elif isinstance(action, DeleteReleaseAction):
            self._release(release_id, "archived", "published")
            del self.releases[release_id]

    async def mutate(
        self, mutations: list[dict[str, Any]], return_documents: bool = False
    ) -> dict[str, Any]:
        self.mutations.append(copy.deepcopy(mutations))
        results = []

        for mutation in mutations:
            if "create" in mutation:
                document = mutation["create"]
                if document["_id"] in self.documents:
                    raise ContentStoreError("Document already exists", status_code=409)
                stored = self._store(document["_id"], document)
                results.append({"id": stored["_id"], "operation": "create", "document": stored})
            elif "patch" in mutation:
                patch = mutation["patch"]
                document = self.documents.get(patch["id"])
                if document is None:
                    raise ContentStoreError("Document not found", status_code=404)
                expected = patch.get("ifRevisionID")
                if expected is not None and document["_rev"] != expected:
                    raise ContentStoreError("Revision mismatch", status_code=409)
                for path, value in patch.get("set", {}).items():
                    _set_path(document, path, value)
                for path in patch.get("unset", []):
                    _unset_path(document, path)
                for path, amount in patch.get("inc", {}).items():
                    _set_path(document, path, _get_path(document, path, 0) + amount)
                if "insert" in patch:
                    path = patch["insert"]["after"].removesuffix("[-1]")
                    _set_path(document, path, _get_path(document, path, []) + patch["insert"]["items"])
                document["_rev"] = self._next_rev()
                results.append({"id": document["_id"], "operation": "update", "document": document})

        payload: dict[str, Any] = {"transactionId": self._transaction()}
        payload["results"] = [
            entry if return_documents else {"id": entry["id"], "operation": entry["operation"]}
            for entry in copy.deepcopy(results)
        ]
        return payload


@pytest.fixture
def store() -> FakeContentStore:
    """Empty in-memory content store."""
    return FakeContentStore()


@pytest.fixture
def test_settings() -> Settings:
    """Settings independent of the process environment."""
    return Settings(
        sanity_project_id=PROJECT_ID,
        sanity_dataset=DATASET,
        max_bulk_items=10,
    )


@pytest.fixture
def engine(store: FakeContentStore, test_settings: Settings) -> ToolEngine:
    """Tool engine over the in-memory store."""
    return ToolEngine(store, test_settings)
