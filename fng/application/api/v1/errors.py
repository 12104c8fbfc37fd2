"""Error bodies for API routes.

Pipeline failures use the same ``{"ok": false, "error": ...}`` body the
manual trigger has always returned.
"""

from fastapi.responses import JSONResponse

from fng.domain.shared.error import FNGError


def error_response(error: FNGError | str, status_code: int = 500) -> JSONResponse:
    message = error.message if isinstance(error, FNGError) else error
    return JSONResponse(status_code=status_code, content={"ok": False, "error": message})
