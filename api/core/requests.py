"""
Request body decoding and required-field validation.

Both failures are client errors (400). Decode failures carry the parser's
message; validation failures carry a fixed message.
"""

from __future__ import annotations

from typing import TypeVar

from fastapi import HTTPException, Request, status
from pydantic import BaseModel, ValidationError, field_validator

MISSING_REQUIRED_PARAMETERS = "Invalid request: missing required parameters"


class RequestBody(BaseModel):
    """
    Base for request payloads: a JSON null reads as an empty string, the
    same as an absent field.
    """

    @field_validator("*", mode="before", check_fields=False)
    @classmethod
    def _null_as_empty(cls, value):
        return "" if value is None else value


RequestModel = TypeVar("RequestModel", bound=BaseModel)


async def decode_body(request: Request, model: type[RequestModel]) -> RequestModel:
    raw = await request.body()
    try:
        return model.model_validate_json(raw)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc


def require(*values: str) -> None:
    if any(not value for value in values):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=MISSING_REQUIRED_PARAMETERS,
        )


def optional(value: str) -> str | None:
    """
    Wire format treats an empty string as "leave unchanged".
    """
    return value or None
