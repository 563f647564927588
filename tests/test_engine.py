"""Tests for tool routing, handlers and failure payloads."""

import pytest

from sanity_mcp.config import Settings, settings
from sanity_mcp.engine import TOOL_HANDLERS, ToolEngine
from sanity_mcp.mcp import TOOL_DEFINITIONS
from sanity_mcp.models import ToolName


class TestToolRegistry:
    def test_every_tool_has_handler_and_definition(self):
        defined = {tool["name"] for tool in TOOL_DEFINITIONS}
        assert set(TOOL_HANDLERS) == set(ToolName)
        assert defined == {tool.value for tool in ToolName}

    def test_bulk_id_lists_follow_configured_cap(self):
        bulk_tools = [tool for tool in TOOL_DEFINITIONS if "ids" in tool["inputSchema"]["properties"]]
        assert len(bulk_tools) == 6
        for tool in bulk_tools:
            assert tool["inputSchema"]["properties"]["ids"]["maxItems"] == settings.max_bulk_items


class TestSingleDocumentTools:
    async def test_get_document(self, engine, store):
        store.add("drafts.abc", title="Draft")

        result = await engine.execute("get_document", {"id": "drafts.abc"})

        assert not result.is_error
        assert result.data["document"]["title"] == "Draft"

    async def test_create_document_returns_checkpoint_payload(self, engine, store):
        result = await engine.execute(
            ToolName.CREATE_DOCUMENT, {"type": "post", "content": {"title": "Hi"}}
        )

        payload = result.to_payload()
        (checkpoint,) = payload["checkpoints"]
        assert checkpoint["type"] == "create"
        assert checkpoint["projectId"] == "test-project"
        assert checkpoint["_id"].startswith("drafts.")

    async def test_patch_document(self, engine, store):
        store.add("drafts.abc", title="Old")

        result = await engine.execute(
            "patch_document",
            {"id": "drafts.abc", "operations": [{"op": "set", "path": "title", "value": "New"}]},
        )

        assert not result.is_error
        assert store.documents["drafts.abc"]["title"] == "New"
        assert result.to_payload()["checkpoints"][0]["type"] == "mutate"

    async def test_publish_document(self, engine, store):
        store.add("drafts.abc")

        result = await engine.execute("publish_document", {"id": "abc"})

        assert result.message == "Published document 'drafts.abc' to 'abc'"
        assert "abc" in store.documents

    async def test_resource_override_targets_other_dataset(self, engine, store):
        store.add("drafts.abc")

        result = await engine.execute(
            "publish_document",
            {"id": "abc", "resource": {"project_id": "other", "dataset": "staging"}},
        )

        assert not result.is_error
        assert ("staging", "drafts.abc") in store.fetched
        assert result.checkpoints[0].dataset == "staging"
        assert result.checkpoints[0].project_id == "other"


class TestVersionTools:
    async def test_create_version(self, engine, store):
        store.add("abc", title="Live")

        result = await engine.execute("create_version", {"id": "abc", "release_id": "r1"})

        assert result.data["versionId"] == "versions.r1.abc"

    async def test_version_unpublish_document(self, engine, store):
        store.add("versions.r1.abc")

        result = await engine.execute(
            "version_unpublish_document", {"id": "abc", "release_id": "r1"}
        )

        assert not result.is_error
        assert "versions.r1.abc" in store.documents

    async def test_version_replace_document(self, engine, store):
        store.add("versions.r1.abc", title="Old")
        store.add("src", title="Source")

        result = await engine.execute(
            "version_replace_document",
            {"id": "abc", "release_id": "r1", "source_document_id": "src"},
        )

        assert not result.is_error
        assert store.documents["versions.r1.abc"]["title"] == "Source"


class TestBulkTools:
    async def test_publish_documents_reports_per_item(self, engine, store):
        store.add("drafts.a")
        store.add("drafts.c")

        result = await engine.execute("publish_documents", {"ids": ["a", "b", "c"]})

        assert not result.is_error
        assert result.message == "Processed 3 documents: 2 successful, 1 failed"
        outcomes = result.data["results"]
        assert [outcome["item"] for outcome in outcomes] == ["a", "b", "c"]
        assert [outcome["success"] for outcome in outcomes] == [True, False, True]
        assert "drafts.b" in outcomes[1]["error"]
        assert result.data["summary"] == {"total": 3, "successful": 2, "failed": 1}
        assert {checkpoint.id for checkpoint in result.checkpoints} == {"drafts.a", "drafts.c"}

    async def test_discard_versions(self, engine, store):
        store.add("versions.r1.a")
        store.add("versions.r1.b")

        result = await engine.execute("discard_versions", {"ids": ["a", "b"], "release_id": "r1"})

        assert result.message == "Processed 2 versions: 2 successful, 0 failed"
        assert store.documents == {}

    async def test_unpublish_documents_reports_per_item(self, engine, store):
        store.add("a", title="Live")

        result = await engine.execute("unpublish_documents", {"ids": ["a", "b"]})

        assert result.message == "Processed 2 documents: 1 successful, 1 failed"
        assert [outcome["success"] for outcome in result.data["results"]] == [True, False]
        assert "'b' not found" in result.data["results"][1]["error"]
        assert "a" not in store.documents
        assert store.documents["drafts.a"]["title"] == "Live"

    async def test_delete_documents_removes_drafts_too(self, engine, store):
        store.add("a")
        store.add("drafts.a")
        store.add("drafts.b")

        result = await engine.execute("delete_documents", {"ids": ["a", "drafts.b", "c"]})

        assert result.data["summary"] == {"total": 3, "successful": 2, "failed": 1}
        assert result.data["results"][2]["item"] == "c"
        assert store.documents == {}

    async def test_create_versions_reports_per_item(self, engine, store):
        store.add("a", title="Live")
        store.add("drafts.b", title="Draft")

        result = await engine.execute(
            "create_versions",
            {"ids": ["a", "drafts.b", "missing", "versions.r1"], "release_id": "r1"},
        )

        assert not result.is_error
        assert result.message == "Processed 4 versions: 2 successful, 2 failed"
        outcomes = result.data["results"]
        assert [outcome["success"] for outcome in outcomes] == [True, True, False, False]
        assert "not found" in outcomes[2]["error"]
        assert "Invalid document id" in outcomes[3]["error"]
        assert store.documents["versions.r1.b"]["title"] == "Draft"
        assert {checkpoint.id for checkpoint in result.checkpoints} == {
            "versions.r1.a",
            "versions.r1.b",
        }

    async def test_invalid_release_id_fails_each_item(self, engine, store):
        store.add("a")
        store.add("b")

        result = await engine.execute(
            "create_versions", {"ids": ["a", "b"], "release_id": "bad.release"}
        )

        assert not result.is_error
        assert result.data["summary"] == {"total": 2, "successful": 0, "failed": 2}
        assert all(
            "release id cannot contain '.'" in outcome["error"]
            for outcome in result.data["results"]
        )
        assert store.mutations == []

    async def test_unpublish_versions_marks_existing_versions(self, engine, store):
        store.add("versions.r1.a")

        result = await engine.execute(
            "unpublish_versions", {"ids": ["a", "b"], "release_id": "r1"}
        )

        assert result.message == "Processed 2 versions: 1 successful, 1 failed"
        assert store.unpublish_markers == {"versions.r1.a": "a"}
        assert "versions.r1.b" in result.data["results"][1]["error"]

    async def test_batch_above_cap_is_rejected_before_dispatch(self, store):
        engine = ToolEngine(
            store, Settings(sanity_project_id="p", sanity_dataset="d", max_bulk_items=2)
        )
        for doc_id in ("a", "b", "c"):
            store.add(f"drafts.{doc_id}")

        result = await engine.execute("publish_documents", {"ids": ["a", "b", "c"]})

        assert result.is_error
        assert "at most 2 items" in result.message
        assert store.actions == []
        assert store.fetched == []

    async def test_empty_ids_are_invalid(self, engine):
        result = await engine.execute("delete_documents", {"ids": []})
        assert result.is_error
        assert "Invalid parameter" in result.message


class TestReleaseTools:
    async def test_create_release_generates_id(self, engine, store):
        result = await engine.execute(
            "create_release", {"title": "Spring launch", "release_type": "asap"}
        )

        assert not result.is_error
        release = result.data["release"]
        assert release["releaseId"].startswith("r")
        assert release["title"] == "Spring launch"
        assert store.releases[release["releaseId"]]["metadata"]["releaseType"] == "asap"
        assert result.checkpoints is None

    async def test_edit_release_keeps_other_fields(self, engine, store):
        await engine.execute(
            "create_release", {"title": "Spring", "description": "Old", "release_id": "rspring"}
        )

        result = await engine.execute(
            "edit_release", {"release_id": "rspring", "description": "New"}
        )

        assert result.message == "Updated metadata for release 'rspring'"
        assert store.releases["rspring"]["metadata"] == {
            "title": "Spring",
            "description": "New",
            "releaseType": "undecided",
        }

    async def test_edit_release_without_changes(self, engine, store):
        result = await engine.execute("edit_release", {"release_id": "rspring"})
        assert result.is_error
        assert result.message.startswith("Error editing release: No changes requested")
        assert store.actions == []

    async def test_schedule_and_unschedule(self, engine, store):
        await engine.execute("create_release", {"title": "Spring", "release_id": "rspring"})

        scheduled = await engine.execute(
            "schedule_release",
            {"release_id": "rspring", "publish_at": "2025-04-04T20:36:00+02:00"},
        )
        assert scheduled.data["publishAt"] == "2025-04-04T18:36:00.000Z"
        assert store.releases["rspring"]["state"] == "scheduled"

        result = await engine.execute(
            "release_action", {"release_id": "rspring", "action": "unschedule"}
        )
        assert result.message == "Unscheduled release 'rspring'"
        assert store.releases["rspring"]["state"] == "active"

    async def test_schedule_requires_timezone(self, engine, store):
        result = await engine.execute(
            "schedule_release", {"release_id": "rspring", "publish_at": "2025-04-04T18:36:00"}
        )
        assert result.is_error
        assert "publish_at" in result.message
        assert store.actions == []

    async def test_publish_release_applies_versions(self, engine, store):
        await engine.execute("create_release", {"title": "Spring", "release_id": "rspring"})
        store.add("a", title="Old")
        store.add("b", title="Retired")
        await engine.execute("create_version", {"id": "a", "release_id": "rspring"})
        await engine.execute(
            "patch_document",
            {
                "id": "versions.rspring.a",
                "operations": [{"op": "set", "path": "title", "value": "New"}],
            },
        )
        await engine.execute("create_version", {"id": "b", "release_id": "rspring"})
        await engine.execute("version_unpublish_document", {"id": "b", "release_id": "rspring"})

        result = await engine.execute(
            "release_action", {"release_id": "rspring", "action": "publish"}
        )

        assert result.message == "Published all documents in release 'rspring'"
        assert store.documents["a"]["title"] == "New"
        assert "b" not in store.documents
        assert not any(key.startswith("versions.") for key in store.documents)

    async def test_delete_active_release_is_refused(self, engine, store):
        await engine.execute("create_release", {"title": "Spring", "release_id": "rspring"})

        refused = await engine.execute(
            "release_action", {"release_id": "rspring", "action": "delete"}
        )
        assert refused.is_error
        assert refused.message == (
            "Error performing release action: Release 'rspring' is active"
        )

        await engine.execute("release_action", {"release_id": "rspring", "action": "archive"})
        deleted = await engine.execute(
            "release_action", {"release_id": "rspring", "action": "delete"}
        )
        assert deleted.message == "Permanently deleted release 'rspring'"
        assert store.releases == {}

    async def test_release_action_rejects_create(self, engine, store):
        result = await engine.execute(
            "release_action", {"release_id": "rspring", "action": "create"}
        )
        assert result.is_error
        assert "Invalid parameter: action" in result.message

    async def test_release_id_with_dot_is_invalid(self, engine, store):
        result = await engine.execute(
            "release_action", {"release_id": "spring.2025", "action": "archive"}
        )
        assert result.is_error
        assert "release id cannot contain '.'" in result.message
        assert store.actions == []


class TestFailurePayloads:
    async def test_unknown_tool(self, engine):
        result = await engine.execute("drop_dataset", {})
        assert result.to_payload() == {"message": "Unknown tool: drop_dataset"}

    async def test_missing_parameter(self, engine):
        result = await engine.execute("get_document", {})
        assert result.is_error
        assert result.message.startswith("Error getting document: Invalid parameter: id")

    async def test_not_found_is_prefixed(self, engine):
        result = await engine.execute("delete_document", {"id": "abc"})
        assert result.to_payload() == {
            "message": "Error performing delete document action: Document 'abc' not found"
        }

    async def test_no_changes_requested(self, engine, store):
        store.add("abc")
        result = await engine.execute("patch_document", {"id": "abc", "operations": []})
        assert result.is_error
        assert "No changes requested" in result.message

    async def test_invalid_id(self, engine):
        result = await engine.execute("publish_document", {"id": "versions.r1"})
        assert result.is_error
        assert "Invalid document id" in result.message

    async def test_unexpected_error_is_sanitized(self, engine, store, monkeypatch):
        async def explode(document_id):
            raise RuntimeError("secret connection string")

        monkeypatch.setattr(store, "get_document", explode)

        result = await engine.execute("get_document", {"id": "abc"})

        assert result.is_error
        assert "secret" not in result.message
        assert result.message.startswith("Error getting document: An error occurred")

    @pytest.mark.parametrize("tool", list(ToolName))
    async def test_no_tool_raises_on_garbage(self, engine, tool):
        result = await engine.execute(tool, {"id": 5, "ids": "x", "release_id": None})
        assert result.is_error
