from typing import Dict, List

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from catalog.schemas.product_schema import REQUIRED_MESSAGES

VALIDATION_TITLE = "One or more validation errors occurred."
INTERNAL_ERROR_DETAIL = "An error occurred while processing your request"


def _field_key(err: dict) -> str:
    # json_invalid locates the error by character offset
    if err.get("type") == "json_invalid":
        return "body"
    loc = err.get("loc", ())
    parts = [str(p) for p in loc if p not in ("body", "query", "path")]
    if parts:
        return parts[-1]
    return str(loc[0]) if loc else "request"


def _message(err: dict, key: str) -> str:
    missing = err.get("type") == "missing" or ("input" in err and err["input"] is None)
    if missing and key in REQUIRED_MESSAGES:
        return REQUIRED_MESSAGES[key]
    ctx = err.get("ctx") or {}
    if err.get("type") == "value_error":
        if "error" in ctx:
            return str(ctx["error"])
        return err.get("msg", "").removeprefix("Value error, ")
    return err.get("msg", "Invalid value")


def validation_errors(exc: RequestValidationError) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = {}
    for err in exc.errors():
        key = _field_key(err)
        errors.setdefault(key, []).append(_message(err, key))
    return errors


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "title": VALIDATION_TITLE,
            "status": status.HTTP_400_BAD_REQUEST,
            "errors": validation_errors(exc),
        },
    )
