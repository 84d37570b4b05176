"""Function-platform entry point.

``handler(event, context)`` takes a Netlify/Lambda style HTTP event, runs it
through the same ASGI application the server uses and converts the response
back into the platform's result dict.
"""

import asyncio
import base64
import re
from typing import Any, Dict, Optional

import httpx

from .core.logging import get_logger
from .main import app

logger = get_logger("serverless")

FUNCTION_PREFIX = re.compile(r"^/\.netlify/functions/[^/]+")


def resolve_path(raw_path: Optional[str]) -> str:
    """Map a function path onto the API's ``/api/...`` routes."""
    path = FUNCTION_PREFIX.sub("", raw_path or "") or "/"
    if not path.startswith("/"):
        path = "/" + path
    if path == "/api" or path.startswith("/api/"):
        return path
    return "/api" + path


def _request_body(event: Dict[str, Any]) -> bytes:
    body = event.get("body") or ""
    if event.get("isBase64Encoded"):
        return base64.b64decode(body)
    return body.encode("utf-8") if isinstance(body, str) else body


async def dispatch(event: Dict[str, Any]) -> Dict[str, Any]:
    """Forward one event to the ASGI app and build the function result."""
    method = (event.get("httpMethod") or "GET").upper()
    path = resolve_path(event.get("path"))
    headers = {k: v for k, v in (event.get("headers") or {}).items() if v is not None}
    # The body is re-sent as-is; httpx sets the length itself
    headers = {k: v for k, v in headers.items() if k.lower() != "content-length"}

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://function") as client:
        response = await client.request(
            method,
            path,
            headers=headers,
            params=event.get("queryStringParameters") or None,
            content=_request_body(event),
        )

    single_headers: Dict[str, str] = {}
    multi_headers: Dict[str, list] = {}
    for key, value in response.headers.multi_items():
        multi_headers.setdefault(key, []).append(value)
        if key.lower() != "set-cookie":
            single_headers[key] = value

    logger.info(
        "Function request handled",
        extra={"method": method, "path": path, "status_code": response.status_code},
    )

    return {
        "statusCode": response.status_code,
        "headers": single_headers,
        "multiValueHeaders": multi_headers,
        "body": response.text,
        "isBase64Encoded": False,
    }


def handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """Synchronous platform entry point."""
    return asyncio.run(dispatch(event))
