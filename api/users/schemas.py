"""
User API schemas (request/response models).

String fields default to "" so a missing, null or empty field all look the
same; required-ness is checked by the handlers.
"""

from __future__ import annotations

from pydantic import BaseModel

from core.requests import RequestBody
from store import User


class GetUserRequest(RequestBody):
    id: str = ""


class GetUserResponse(BaseModel):
    user: User | None = None


class CreateUserRequest(RequestBody):
    email: str = ""
    name: str = ""


class CreateUserResponse(BaseModel):
    id: str


class UpdateUserRequest(RequestBody):
    id: str = ""
    email: str = ""
    name: str = ""


class UpdateUserResponse(BaseModel):
    id: str


class DeleteUserRequest(RequestBody):
    id: str = ""


class DeleteUserResponse(BaseModel):
    id: str
