"""MCP tool handlers for executing tool operations."""

import json
from typing import Any, Iterable, Optional

from mcp import McpError
from mcp.types import ErrorData, TextContent

from sortable_posts.config import get_settings
from sortable_posts.exceptions import (
    AuthorizationError,
    DatabaseError,
    NoOpError,
    PartialWriteError,
    SortablePostsError,
    UnsupportedObjectTypeError,
    ValidationError,
)
from sortable_posts.services.reorder_service import ReorderRequest, ReorderService


def check_capability(capabilities: Optional[Iterable[str]] = None) -> None:
    """
    Ensure the caller holds the capability required to reorder.

    Args:
        capabilities: Capabilities of the HTTP caller. None means the stdio
            operator, whose capabilities come from MCP_CAPABILITIES.

    Raises:
        AuthorizationError: If the capabilities do not include it
    """
    settings = get_settings()
    if capabilities is None:
        capabilities = settings.mcp_capabilities
    if settings.required_capability not in capabilities:
        raise AuthorizationError(settings.required_capability)


async def handle_reorder_items(
    arguments: dict[str, Any], db: Any, capabilities: Optional[Iterable[str]] = None
) -> list[TextContent]:
    """Handle reorder_items tool."""
    check_capability(capabilities)
    request = ReorderRequest.from_payload(arguments)
    with db.session() as session:
        result = ReorderService(session).reorder(request)
    if not result.success:
        raise result.error
    return [TextContent(type="text", text=json.dumps(result.to_dict(), indent=2))]


async def handle_get_item_order(
    arguments: dict[str, Any], db: Any, capabilities: Optional[Iterable[str]] = None
) -> list[TextContent]:
    """Handle get_item_order tool."""
    with db.session() as session:
        order = ReorderService(session).current_order(
            arguments.get("ids"), arguments.get("object_type")
        )
        result = {"order": order}
        return [TextContent(type="text", text=json.dumps(result, indent=2))]


TOOL_HANDLERS = {
    "reorder_items": handle_reorder_items,
    "get_item_order": handle_get_item_order,
}


async def call_tool_handler(
    tool_name: str,
    arguments: dict[str, Any],
    db: Any,
    capabilities: Optional[Iterable[str]] = None,
) -> list[TextContent]:
    """
    Call the appropriate tool handler.

    Args:
        tool_name: Name of the tool to call
        arguments: Tool arguments
        db: Database instance
        capabilities: Capabilities of the HTTP caller (None for the stdio operator)

    Returns:
        List of TextContent with tool execution result

    Raises:
        McpError: If tool name is unknown or handler raises an error
    """
    if tool_name not in TOOL_HANDLERS:
        raise McpError(
            ErrorData(
                code=-32601,  # Method not found
                message=f"Unknown tool: {tool_name}",
            )
        )

    handler = TOOL_HANDLERS[tool_name]

    try:
        return await handler(arguments, db, capabilities)
    except McpError:
        raise
    except (ValidationError, UnsupportedObjectTypeError) as e:
        raise McpError(
            ErrorData(
                code=-32602,  # Invalid params
                message=f"{e.code}: {str(e)}",
            )
        )
    except NoOpError as e:
        raise McpError(
            ErrorData(
                code=-32001,  # Custom error: nothing happened
                message=str(e),
            )
        )
    except AuthorizationError as e:
        raise McpError(
            ErrorData(
                code=-32003,  # Custom error: forbidden
                message=str(e),
            )
        )
    except (PartialWriteError, DatabaseError) as e:
        raise McpError(
            ErrorData(
                code=-32603,  # Internal error
                message=f"{e.code}: {str(e)}",
            )
        )
    except SortablePostsError as e:
        raise McpError(
            ErrorData(
                code=-32603,
                message=str(e),
            )
        )
