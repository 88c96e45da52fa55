"""Tests for MCP tool handlers and the stdio server."""

import asyncio
import json
from unittest.mock import patch

import pytest

pytestmark = pytest.mark.integration

from mcp import McpError

from sortable_posts.mcp.tool_handlers import TOOL_HANDLERS, call_tool_handler
from sortable_posts.mcp.tool_schemas import get_tool_schemas
from sortable_posts.mcp_server import call_tool, list_tools
from tests.conftest import read_post_order


def run_tool(name, arguments, db):
    return asyncio.run(call_tool_handler(name, arguments, db))


def tool_error(name, arguments, db) -> McpError:
    with pytest.raises(McpError) as exc_info:
        run_tool(name, arguments, db)
    return exc_info.value


class TestToolSchemas:
    """Tool schema definitions."""

    def test_every_schema_has_a_handler(self):
        assert set(get_tool_schemas()) == set(TOOL_HANDLERS)

    def test_object_type_enum_lists_registered_types(self):
        schema = get_tool_schemas()["reorder_items"]["inputSchema"]
        assert schema["properties"]["object_type"]["enum"] == ["edit", "edit-tags", "post", "term"]
        assert schema["required"] == ["order", "object_type"]

    def test_server_lists_tools(self):
        tools = asyncio.run(list_tools())
        assert [tool.name for tool in tools] == ["reorder_items", "get_item_order"]


class TestReorderItemsTool:
    """reorder_items tool."""

    def test_reorder_posts(self, temp_db, sample_posts):
        result = run_tool(
            "reorder_items", {"order": ["post-4", "post-8"], "start": 10, "object_type": "post"}, temp_db
        )
        body = json.loads(result[0].text)
        assert body["message"] == "Saved successfully."
        assert read_post_order(temp_db, ["4", "8"]) == {"4": 10, "8": 11}

    def test_validation_error(self, temp_db):
        error = tool_error("reorder_items", {"order": "1", "object_type": "post"}, temp_db)
        assert error.error.code == -32602
        assert "order-not-array" in error.error.message

    def test_unsupported_type(self, temp_db):
        error = tool_error("reorder_items", {"order": ["1"], "object_type": "widget"}, temp_db)
        assert error.error.code == -32602
        assert "not-sortable" in error.error.message

    def test_nothing_happened(self, temp_db, sample_posts):
        error = tool_error("reorder_items", {"order": ["404"], "object_type": "post"}, temp_db)
        assert error.error.code == -32001
        assert error.error.message == "Nothing happened. Try again."

    def test_partial_write(self, temp_db, sample_terms):
        error = tool_error("reorder_items", {"order": ["a", "zz"], "object_type": "term"}, temp_db)
        assert error.error.code == -32603
        assert "partial-write" in error.error.message

    def test_operator_without_capability(self, temp_db, sample_posts):
        with patch("sortable_posts.mcp.tool_handlers.get_settings") as get_settings:
            get_settings.return_value.required_capability = "publish_posts"
            get_settings.return_value.mcp_capabilities = ["read"]
            error = tool_error("reorder_items", {"order": ["2", "1"], "object_type": "post"}, temp_db)
        assert error.error.code == -32003
        assert read_post_order(temp_db, ["1", "2"]) == {"1": 0, "2": 0}

    def test_caller_capabilities_take_precedence(self, temp_db, sample_posts):
        arguments = {"order": ["2", "1"], "object_type": "post"}
        with pytest.raises(McpError) as exc_info:
            asyncio.run(call_tool_handler("reorder_items", arguments, temp_db, {"read"}))
        assert exc_info.value.error.code == -32003
        assert read_post_order(temp_db, ["1", "2"]) == {"1": 0, "2": 0}

        asyncio.run(call_tool_handler("reorder_items", arguments, temp_db, {"publish_posts"}))
        assert read_post_order(temp_db, ["1", "2"]) == {"2": 0, "1": 1}


class TestGetItemOrderTool:
    """get_item_order tool."""

    def test_reads_term_positions(self, temp_db, sample_terms):
        run_tool("reorder_items", {"order": ["c", "a"], "object_type": "term"}, temp_db)
        result = run_tool("get_item_order", {"ids": ["a", "c", "e"], "object_type": "term"}, temp_db)
        assert json.loads(result[0].text) == {"order": {"c": 1, "a": 2}}

    def test_missing_ids(self, temp_db):
        error = tool_error("get_item_order", {"object_type": "term"}, temp_db)
        assert error.error.code == -32602


class TestServer:
    """Stdio server call_tool wrapper."""

    def test_unknown_tool(self, temp_db):
        error = tool_error("drop_tables", {}, temp_db)
        assert error.error.code == -32601

    def test_call_tool_uses_global_db(self, temp_db, sample_posts):
        with patch("sortable_posts.mcp_server.get_db", return_value=temp_db):
            result = asyncio.run(
                call_tool("reorder_items", {"order": ["9", "1"], "object_type": "post"})
            )
        assert json.loads(result[0].text)["code"] == "sortable-posts-updated"
        assert read_post_order(temp_db, ["1", "9"]) == {"9": 0, "1": 1}

    def test_call_tool_wraps_unexpected_errors(self, temp_db):
        with patch("sortable_posts.mcp_server.get_db", return_value=temp_db), patch(
            "sortable_posts.mcp_server.call_tool_handler", side_effect=RuntimeError("boom")
        ):
            with pytest.raises(McpError) as exc_info:
                asyncio.run(call_tool("reorder_items", None))
        assert exc_info.value.error.code == -32603
        assert "boom" in exc_info.value.error.message
