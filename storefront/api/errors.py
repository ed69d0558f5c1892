# storefront/api/errors.py
from typing import Any, Dict, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# path parameter -> what a bad value is reported as
_PATH_LABELS = {
    "product_id": "product",
    "user_id": "user",
    "item_id": "cart item",
}


def format_validation_errors(errors: Sequence[Dict[str, Any]]) -> str:
    """
    Flattens pydantic errors into one line, e.g.
    'Validation error: Input should be greater than 0 at "quantity"'.
    """
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query")]
        msg = err.get("msg", "Invalid value")
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, "):]
        parts.append(f'{msg} at "{".".join(loc)}"' if loc else msg)
    return "Validation error: " + "; ".join(parts)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    for err in errors:
        loc = err.get("loc", ())
        if len(loc) == 2 and loc[0] == "path":
            label = _PATH_LABELS.get(loc[1], str(loc[1]))
            return JSONResponse(status_code=400, content={"message": f"Invalid {label} ID"})

    return JSONResponse(status_code=400, content={"message": format_validation_errors(errors)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
