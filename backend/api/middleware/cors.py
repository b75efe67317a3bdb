"""
CORS handling.

Every OPTIONS request is answered with 204 No Content. Preflights get the
CORS headers from Starlette's middleware; other OPTIONS requests never
reach the routers.
"""

from fastapi import Request, Response
from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware as StarletteCORSMiddleware

# Headers describing the "OK" body Starlette puts on preflight responses
BODY_HEADERS = ("content-length", "content-type")


class CORSMiddleware(StarletteCORSMiddleware):
    """Starlette's CORS middleware with bodiless 204 preflight responses."""

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers)
        if response.status_code != 200:
            return response
        headers = {
            key: value
            for key, value in response.headers.items()
            if key not in BODY_HEADERS
        }
        return Response(status_code=204, headers=headers)


async def options_no_content(request: Request, call_next) -> Response:
    """Short-circuit OPTIONS requests that are not CORS preflights."""
    if request.method == "OPTIONS":
        return Response(status_code=204)
    return await call_next(request)
