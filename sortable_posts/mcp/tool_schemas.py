"""MCP tool schema definitions."""

from typing import Any

from sortable_posts.services.reorder.strategies import default_registry


def get_tool_schemas() -> dict[str, dict[str, Any]]:
    """Get all MCP tool schemas."""
    object_types = default_registry().names()
    return {
        "reorder_items": {
            "name": "reorder_items",
            "description": (
                "Save a new display order for posts or taxonomy terms. Posts get "
                "consecutive menu_order values from start; terms get their 1-based position."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "order": {
                        "type": "array",
                        "description": "Item IDs in their new order (e.g. ['post-12', 'post-7'])",
                        "items": {"type": "string"},
                    },
                    "start": {
                        "type": "integer",
                        "description": "Order value of the first post (default: 0, ignored for terms)",
                    },
                    "object_type": {
                        "type": "string",
                        "description": "Kind of object being sorted",
                        "enum": object_types,
                    },
                },
                "required": ["order", "object_type"],
            },
        },
        "get_item_order": {
            "name": "get_item_order",
            "description": "Read the stored order value of posts or terms",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "ids": {
                        "type": "array",
                        "description": "Item IDs to look up",
                        "items": {"type": "string"},
                    },
                    "object_type": {
                        "type": "string",
                        "description": "Kind of object",
                        "enum": object_types,
                    },
                },
                "required": ["ids", "object_type"],
            },
        },
    }
