"""
CORS middleware for the /api/ surface.

Every response under /api/ carries permissive cross-origin headers, and
pre-flight requests to any /api/ path are answered here with an empty 200
whether or not a route exists for the path.
"""

from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from src.domain.enhancement import resolve_method
from src.domain.ports import MethodDecision

API_PREFIX = "/api/"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class ApiCorsMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if not request.url.path.startswith(API_PREFIX):
            return await call_next(request)

        if resolve_method(request.method) is MethodDecision.PREFLIGHT:
            response = Response(status_code=status.HTTP_200_OK)
        else:
            response = await call_next(request)

        response.headers.update(CORS_HEADERS)
        return response
