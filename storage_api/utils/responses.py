# storage_api/utils/responses.py
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def envelope(message: str, data: Any = None, error: bool = False) -> dict:
    return {"message": message, "data": data, "error": error}


def error_response(status_code: int, message: str, data: Optional[Any] = None) -> JSONResponse:
    """JSON error reply wrapped in the standard envelope."""
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(envelope(message, data=data, error=True)),
    )
