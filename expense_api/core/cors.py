"""Permissive CORS handling for the browser frontend.

Every response carries the same three headers, error envelopes included, and
preflight ``OPTIONS`` requests are answered with an empty 204 on any path
before routing happens.
"""

from __future__ import annotations

from typing import Dict

from starlette.responses import Response

ALLOWED_METHODS = "GET, POST, OPTIONS"
ALLOWED_HEADERS = "Content-Type"


def cors_headers(allow_origin: str = "*") -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
    }


def make_cors_middleware(allow_origin: str = "*"):
    headers = cors_headers(allow_origin)

    async def cors_middleware(request, call_next):  # type: ignore
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=headers)
        response = await call_next(request)
        response.headers.update(headers)
        return response

    return cors_middleware
