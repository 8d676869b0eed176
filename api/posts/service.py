"""
Post business logic.
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
    logger.warning("post_%s_failed kind=%s error=%s", action, type(exc).__name__, exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(exc),
    )


async def get_post(store: BlogStore, payload: schemas.GetPostRequest) -> schemas.GetPostResponse:
    try:
        post = await store.get_post(payload.id)
    except StoreError as exc:
        raise _server_error("get", exc) from exc
    return schemas.GetPostResponse(post=post)


async def get_all_posts(store: BlogStore, payload: schemas.GetAllPostsRequest) -> schemas.GetAllPostsResponse:
    try:
        posts = await store.get_all_posts(payload.user_id)
    except StoreError as exc:
        raise _server_error("list", exc) from exc
    return schemas.GetAllPostsResponse(posts=posts)


async def create_post(store: BlogStore, payload: schemas.CreatePostRequest) -> schemas.CreatePostResponse:
    try:
        post_id = await store.create_post(payload.user_id, payload.title, payload.content)
    except StoreError as exc:
        raise _server_error("create", exc) from exc
    logger.info("post_created post_id=%s user_id=%s", post_id, payload.user_id)
    return schemas.CreatePostResponse(id=post_id)


async def update_post(store: BlogStore, payload: schemas.UpdatePostRequest) -> schemas.UpdatePostResponse:
    try:
        post_id = await store.update_post(
            payload.id,
            title=optional(payload.title),
            content=optional(payload.content),
        )
    except StoreError as exc:
        raise _server_error("update", exc) from exc
    return schemas.UpdatePostResponse(id=post_id)


async def delete_post(store: BlogStore, payload: schemas.DeletePostRequest) -> schemas.DeletePostResponse:
    try:
        post_id = await store.delete_post(payload.id)
    except StoreError as exc:
        raise _server_error("delete", exc) from exc
    logger.info("post_deleted post_id=%s", post_id)
    return schemas.DeletePostResponse(id=post_id)
