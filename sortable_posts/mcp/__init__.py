"""MCP module with tool schemas and handlers."""

from sortable_posts.mcp.tool_handlers import call_tool_handler, TOOL_HANDLERS
from sortable_posts.mcp.tool_schemas import get_tool_schemas

__all__ = [
    "call_tool_handler",
    "TOOL_HANDLERS",
    "get_tool_schemas",
]
