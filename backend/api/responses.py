"""
Response classes.

All JSON responses declare a UTF-8 charset.
"""

from fastapi.responses import JSONResponse as FastAPIJSONResponse


class JSONResponse(FastAPIJSONResponse):
    """JSON response with an explicit charset in the Content-Type."""

    media_type = "application/json; charset=utf-8"
