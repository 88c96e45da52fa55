"""HTTP API for Sortable Posts.

Serves the drag and drop reorder endpoint used by the admin list screens,
plus the MCP tools as plain JSON-RPC 2.0 over HTTP.
"""

import json
import logging
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, Header, Request
from fastapi.responses import JSONResponse
from mcp import McpError

from sortable_posts.config import get_settings
from sortable_posts.exceptions import AuthorizationError, SortablePostsError, ValidationError
from sortable_posts.mcp.tool_handlers import call_tool_handler
from sortable_posts.mcp.tool_schemas import get_tool_schemas
from sortable_posts.services.reorder_service import ReorderRequest, ReorderService
from sortable_posts.storage.database import Database, get_db

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Sortable Posts",
    description="Drag and drop ordering for posts and taxonomy terms",
    version="0.1.0",
)


def get_database() -> Database:
    """Database used by request handlers."""
    return get_db()


def get_capabilities(x_capabilities: Optional[str] = Header(default=None)) -> Optional[set[str]]:
    """
    Capabilities the host granted to the current user.

    Returns None when the request carries no user at all.
    """
    if x_capabilities is None:
        return None
    return {cap.strip() for cap in x_capabilities.split(",") if cap.strip()}


def require_capability(capabilities: Optional[set[str]] = Depends(get_capabilities)) -> None:
    """Reject callers that cannot publish content before the request is processed."""
    capability = get_settings().required_capability
    if capabilities is None:
        raise AuthorizationError(capability, authenticated=False)
    if capability not in capabilities:
        raise AuthorizationError(capability)


def error_body(error: SortablePostsError) -> dict[str, Any]:
    """Error body in the host's REST envelope."""
    return {
        "code": error.code,
        "message": str(error),
        "data": {"status": error.status, "after_message": ""},
    }


@app.exception_handler(SortablePostsError)
async def sortable_posts_error_handler(request: Request, exc: SortablePostsError) -> JSONResponse:
    return JSONResponse(status_code=exc.status, content=error_body(exc))


async def read_json_body(request: Request) -> Any:
    """Parsed JSON body; an empty body reads as an empty object."""
    body = await request.body()
    if not body.strip():
        return {}
    return json.loads(body)


async def reorder_payload(request: Request) -> Dict[str, Any]:
    """
    Reorder fields from the request body.

    Resolved after require_capability; the body of an unauthorized request
    is never read.
    """
    try:
        payload = await read_json_body(request)
    except ValueError as e:
        raise ValidationError("Order needs to be an array", "order") from e
    if not isinstance(payload, dict):
        raise ValidationError("Order needs to be an array", "order")
    return payload


@app.api_route(
    "/sortable-posts/update",
    methods=["POST", "PUT", "PATCH"],
    dependencies=[Depends(require_capability)],
)
def update_sort_order(
    payload: Dict[str, Any] = Depends(reorder_payload),
    db: Database = Depends(get_database),
) -> JSONResponse:
    """Save the order submitted by the drag and drop UI."""
    request = ReorderRequest.from_payload(payload)
    with db.session() as session:
        result = ReorderService(session).reorder(request)
    return JSONResponse(status_code=result.status, content=result.to_dict())


async def handle_jsonrpc_request(
    request: Dict[str, Any], db: Database, capabilities: Optional[set[str]] = None
) -> Dict[str, Any]:
    """Handle JSON-RPC 2.0 request."""
    jsonrpc = request.get("jsonrpc", "2.0")
    request_id = request.get("id")
    method = request.get("method")
    params = request.get("params") or {}

    if method == "initialize":
        return {
            "jsonrpc": jsonrpc,
            "id": request_id,
            "result": {
                "protocolVersion": "2024-11-05",
                "capabilities": {"tools": {}},
                "serverInfo": {
                    "name": "sortable-posts",
                    "version": "0.1.0"
                }
            }
        }
    elif method == "tools/list":
        tools = [
            {
                "name": tool_def["name"],
                "description": tool_def["description"],
                "inputSchema": tool_def["inputSchema"]
            }
            for tool_def in get_tool_schemas().values()
        ]
        return {
            "jsonrpc": jsonrpc,
            "id": request_id,
            "result": {
                "tools": tools
            }
        }
    elif method == "tools/call":
        tool_name = params.get("name")
        arguments = params.get("arguments") or {}

        try:
            result = await call_tool_handler(tool_name, arguments, db, capabilities)
        except McpError as e:
            return {
                "jsonrpc": jsonrpc,
                "id": request_id,
                "error": {
                    "code": e.error.code,
                    "message": e.error.message
                }
            }
        except Exception as e:
            logger.exception(f"Error handling tool {tool_name}")
            return {
                "jsonrpc": jsonrpc,
                "id": request_id,
                "error": {
                    "code": -32603,
                    "message": f"Internal error: {str(e)}"
                }
            }

        return {
            "jsonrpc": jsonrpc,
            "id": request_id,
            "result": {
                "content": [
                    {
                        "type": "text",
                        "text": result[0].text
                    }
                ]
            }
        }
    else:
        return {
            "jsonrpc": jsonrpc,
            "id": request_id,
            "error": {
                "code": -32601,
                "message": f"Method not found: {method}"
            }
        }


@app.post("/mcp", dependencies=[Depends(require_capability)])
async def mcp_jsonrpc(
    request: Request,
    capabilities: Optional[set[str]] = Depends(get_capabilities),
    db: Database = Depends(get_database),
):
    """JSON-RPC endpoint exposing the MCP tools over HTTP."""
    try:
        payload = await read_json_body(request)
    except ValueError:
        return {"jsonrpc": "2.0", "id": None, "error": {"code": -32700, "message": "Parse error"}}
    if not isinstance(payload, dict):
        return {"jsonrpc": "2.0", "id": None, "error": {"code": -32600, "message": "Invalid Request"}}
    return await handle_jsonrpc_request(payload, db, capabilities)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "sortable-posts"}


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
