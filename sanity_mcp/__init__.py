"""Sanity MCP Server.

MCP tools for document identity, release versioning and bulk state
transitions against a Sanity content dataset.
"""

__version__ = "0.3.0"
