"""MCP Tool Definitions for the Sanity MCP server.

This module contains all tool definitions returned by the tools/list method.
Each tool definition includes the schema for its input parameters.

Tool Categories:
    - Documents: get_document, create_document, patch_document
    - Document Actions: publish_document, unpublish_document, delete_document
    - Release Versions: create_version, version_replace_document,
      version_discard_document, version_unpublish_document
    - Bulk: publish_documents, unpublish_documents, delete_documents,
      create_versions, discard_versions, unpublish_versions
    - Releases: create_release, edit_release, schedule_release, release_action
"""

from ..config import settings

RESOURCE_SCHEMA = {
    "type": "object",
    "description": "Target this project and dataset instead of the configured default",
    "properties": {
        "project_id": {"type": "string"},
        "dataset": {"type": "string"},
    },
    "required": ["project_id", "dataset"],
}

ID_SCHEMA = {
    "type": "string",
    "description": "Document ID. Published, drafts.* and versions.<release>.* forms are accepted.",
}

RELEASE_ID_SCHEMA = {
    "type": "string",
    "description": "Release ID, without the versions. prefix",
}

IDS_SCHEMA = {
    "type": "array",
    "items": {"type": "string"},
    "minItems": 1,
    "maxItems": settings.max_bulk_items,
    "description": "Document IDs. Each is processed independently and failures are reported per item.",
}

RELEASE_TYPE_SCHEMA = {
    "type": "string",
    "enum": ["asap", "undecided", "scheduled"],
    "description": "When the release is meant to go out",
}

RELEASE_METADATA_PROPERTIES = {
    "description": {"type": "string", "description": "Release description"},
    "release_type": RELEASE_TYPE_SCHEMA,
    "intended_publish_at": {
        "type": "string",
        "format": "date-time",
        "description": "Informational publish time, ISO 8601 with offset",
    },
}


TOOL_DEFINITIONS: list[dict] = [
    # ============ Document Tools ============
    {
        "name": "get_document",
        "description": "Fetch a document by ID. Draft IDs read the draft; pass release_id to read the version in a release.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "id": ID_SCHEMA,
                "release_id": RELEASE_ID_SCHEMA,
                "draft_handling": {
                    "type": "string",
                    "enum": ["published", "preserve"],
                    "default": "preserve",
                    "description": "'published' reads drafts.* IDs through their published ID",
                },
                "resource": RESOURCE_SCHEMA,
            },
            "required": ["id"],
        },
    },
    {
        "name": "create_document",
        "description": "Create a new draft document, or a version in a release when release_id is given. Returns a creation checkpoint.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "type": {"type": "string", "description": "The document type"},
                "content": {
                    "type": "object",
                    "description": "Initial document fields",
                    "default": {},
                },
                "release_id": RELEASE_ID_SCHEMA,
                "resource": RESOURCE_SCHEMA,
            },
            "required": ["type"],
        },
    },
    {
        "name": "patch_document",
        "description": "Apply set, unset, append and inc operations to a document. The patch only applies if the document has not changed since it was read.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "id": ID_SCHEMA,
                "operations": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "properties": {
                            "op": {"type": "string", "enum": ["set", "unset", "append", "inc"]},
                            "path": {"type": "string", "description": "Field path, e.g. title or author.name"},
                            "value": {"description": "Value for set"},
                            "items": {"type": "array", "description": "Items for append"},
                            "amount": {"type": "number", "default": 1, "description": "Amount for inc"},
                        },
                        "required": ["op", "path"],
                    },
                },
                "release_id": RELEASE_ID_SCHEMA,
                "resource": RESOURCE_SCHEMA,
            },
            "required": ["id", "operations"],
        },
    },
    # ============ Document Action Tools ============
    {
        "name": "publish_document",
        "description": "Publish a document's draft, replacing the published document.",
        "inputSchema": {
            "type": "object",
            "properties": {"id": ID_SCHEMA, "resource": RESOURCE_SCHEMA},
            "required": ["id"],
        },
    },
    {
        "name": "unpublish_document",
        "description": "Unpublish a document, moving its published content back to a draft.",
        "inputSchema": {
            "type": "object",
            "properties": {"id": ID_SCHEMA, "resource": RESOURCE_SCHEMA},
            "required": ["id"],
        },
    },
    {
        "name": "delete_document",
        "description": "Delete a published document together with its draft.",
        "inputSchema": {
            "type": "object",
            "properties": {"id": ID_SCHEMA, "resource": RESOURCE_SCHEMA},
            "required": ["id"],
        },
    },
    # ============ Release Version Tools ============
    {
        "name": "create_version",
        "description": "Add a document to a release by copying its current content into a version.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "id": ID_SCHEMA,
                "release_id": RELEASE_ID_SCHEMA,
                "resource": RESOURCE_SCHEMA,
            },
            "required": ["id", "release_id"],
        },
    },
    {
        "name": "version_replace_document",
        "description": "Replace a release version's content with the content of another document.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "id": ID_SCHEMA,
                "release_id": RELEASE_ID_SCHEMA,
                "source_document_id": {
                    "type": "string",
                    "description": "Document whose content replaces the version",
                },
                "resource": RESOURCE_SCHEMA,
            },
            "required": ["id", "release_id", "source_document_id"],
        },
    },
    {
        "name": "version_discard_document",
        "description": "Remove a document's version from a release.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "id": ID_SCHEMA,
                "release_id": RELEASE_ID_SCHEMA,
                "resource": RESOURCE_SCHEMA,
            },
            "required": ["id", "release_id"],
        },
    },
    {
        "name": "version_unpublish_document",
        "description": "Mark a document to be unpublished when the release is published. The version itself is kept.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "id": ID_SCHEMA,
                "release_id": RELEASE_ID_SCHEMA,
                "resource": RESOURCE_SCHEMA,
            },
            "required": ["id", "release_id"],
        },
    },
    # ============ Bulk Tools ============
    {
        "name": "publish_documents",
        "description": "Publish several documents concurrently. Returns per-document results and summary counts.",
        "inputSchema": {
            "type": "object",
            "properties": {"ids": IDS_SCHEMA, "resource": RESOURCE_SCHEMA},
            "required": ["ids"],
        },
    },
    {
        "name": "unpublish_documents",
        "description": "Unpublish several documents concurrently.",
        "inputSchema": {
            "type": "object",
            "properties": {"ids": IDS_SCHEMA, "resource": RESOURCE_SCHEMA},
            "required": ["ids"],
        },
    },
    {
        "name": "delete_documents",
        "description": "Delete several documents and their drafts concurrently.",
        "inputSchema": {
            "type": "object",
            "properties": {"ids": IDS_SCHEMA, "resource": RESOURCE_SCHEMA},
            "required": ["ids"],
        },
    },
    {
        "name": "create_versions",
        "description": "Add several documents to one release.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "ids": IDS_SCHEMA,
                "release_id": RELEASE_ID_SCHEMA,
                "resource": RESOURCE_SCHEMA,
            },
            "required": ["ids", "release_id"],
        },
    },
    {
        "name": "discard_versions",
        "description": "Remove several documents' versions from one release.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "ids": IDS_SCHEMA,
                "release_id": RELEASE_ID_SCHEMA,
                "resource": RESOURCE_SCHEMA,
            },
            "required": ["ids", "release_id"],
        },
    },
    {
        "name": "unpublish_versions",
        "description": "Mark several documents to be unpublished when one release is published.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "ids": IDS_SCHEMA,
                "release_id": RELEASE_ID_SCHEMA,
                "resource": RESOURCE_SCHEMA,
            },
            "required": ["ids", "release_id"],
        },
    },
    # ============ Release Tools ============
    {
        "name": "create_release",
        "description": "Create a new, empty release. Returns the generated release ID.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": 'Release title, e.g. "Spring launch"'},
                **RELEASE_METADATA_PROPERTIES,
                "release_type": {**RELEASE_TYPE_SCHEMA, "default": "undecided"},
                "release_id": {
                    **RELEASE_ID_SCHEMA,
                    "description": "Release ID to use instead of a generated one",
                },
                "resource": RESOURCE_SCHEMA,
            },
            "required": ["title"],
        },
    },
    {
        "name": "edit_release",
        "description": "Change a release's title, description, type or intended publish time. Omitted fields are kept.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "release_id": RELEASE_ID_SCHEMA,
                "title": {"type": "string", "description": "New release title"},
                **RELEASE_METADATA_PROPERTIES,
                "resource": RESOURCE_SCHEMA,
            },
            "required": ["release_id"],
        },
    },
    {
        "name": "schedule_release",
        "description": "Schedule a release to be published automatically at a given time.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "release_id": RELEASE_ID_SCHEMA,
                "publish_at": {
                    "type": "string",
                    "format": "date-time",
                    "description": "ISO 8601 time with offset, e.g. 2025-04-04T18:36:00Z",
                },
                "resource": RESOURCE_SCHEMA,
            },
            "required": ["release_id", "publish_at"],
        },
    },
    {
        "name": "release_action",
        "description": "Publish, archive, unarchive, unschedule or permanently delete a release.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "release_id": RELEASE_ID_SCHEMA,
                "action": {
                    "type": "string",
                    "enum": ["publish", "archive", "unarchive", "unschedule", "delete"],
                    "description": "publish releases every version in one transaction; delete needs an archived or published release",
                },
                "resource": RESOURCE_SCHEMA,
            },
            "required": ["release_id", "action"],
        },
    },
]
