"""
User business logic.

Every storage failure is reported as a 500 carrying the store's message,
including "not found" on update/delete.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core.errors import StoreError
from core.requests import optional
from store import BlogStore

from . import schemas

logger = logging.getLogger(__name__)


def _server_error(action: str, exc: StoreError) -> HTTPException:
    logger.warning("user_%s_failed kind=%s error=%s", action, type(exc).__name__, exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(exc),
    )


async def get_user(store: BlogStore, payload: schemas.GetUserRequest) -> schemas.GetUserResponse:
    try:
        user = await store.get_user(payload.id)
    except StoreError as exc:
        raise _server_error("get", exc) from exc
    return schemas.GetUserResponse(user=user)


async def create_user(store: BlogStore, payload: schemas.CreateUserRequest) -> schemas.CreateUserResponse:
    try:
        user_id = await store.create_user(payload.name, payload.email)
    except StoreError as exc:
        raise _server_error("create", exc) from exc
    logger.info("user_created user_id=%s", user_id)
    return schemas.CreateUserResponse(id=user_id)


async def update_user(store: BlogStore, payload: schemas.UpdateUserRequest) -> schemas.UpdateUserResponse:
    try:
        user_id = await store.update_user(
            payload.id,
            name=optional(payload.name),
            email=optional(payload.email),
        )
    except StoreError as exc:
        raise _server_error("update", exc) from exc
    return schemas.UpdateUserResponse(id=user_id)


async def delete_user(store: BlogStore, payload: schemas.DeleteUserRequest) -> schemas.DeleteUserResponse:
    try:
        user_id = await store.delete_user(payload.id)
    except StoreError as exc:
        raise _server_error("delete", exc) from exc
    logger.info("user_deleted user_id=%s", user_id)
    return schemas.DeleteUserResponse(id=user_id)
