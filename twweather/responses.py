from typing import Any

from fastapi.responses import JSONResponse


def error_response(
    status_code: int,
    *,
    error: str,
    message: str | None = None,
    details: Any = None,
) -> JSONResponse:
    """
    Create a JSON error response. Message and details are left out of the
    body when not given.
    """

    content: dict[str, Any] = {"error": error}
    if message is not None:
        content["message"] = message
    if details is not None:
        content["details"] = details

    return JSONResponse(status_code=status_code, content=content)
