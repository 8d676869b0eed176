"""
Post API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from core.dependencies import get_store
from core.requests import decode_body, require
from store import BlogStore

from . import schemas, service

router = APIRouter()


@router.get("/posts", response_model=schemas.GetPostResponse)
async def get_post(
    request: Request,
    store: BlogStore = Depends(get_store),
) -> schemas.GetPostResponse:
    payload = await decode_body(request, schemas.GetPostRequest)
    require(payload.id)
    return await service.get_post(store, payload)


@router.get("/posts/all", response_model=schemas.GetAllPostsResponse)
async def get_all_posts(
    request: Request,
    store: BlogStore = Depends(get_store),
) -> schemas.GetAllPostsResponse:
    payload = await decode_body(request, schemas.GetAllPostsRequest)
    require(payload.user_id)
    return await service.get_all_posts(store, payload)


@router.post("/posts", response_model=schemas.CreatePostResponse)
async def create_post(
    request: Request,
    store: BlogStore = Depends(get_store),
) -> schemas.CreatePostResponse:
    payload = await decode_body(request, schemas.CreatePostRequest)
    require(payload.user_id)
    return await service.create_post(store, payload)


@router.put("/posts", response_model=schemas.UpdatePostResponse)
async def update_post(
    request: Request,
    store: BlogStore = Depends(get_store),
) -> schemas.UpdatePostResponse:
    payload = await decode_body(request, schemas.UpdatePostRequest)
    require(payload.id)
    return await service.update_post(store, payload)


@router.delete("/posts", response_model=schemas.DeletePostResponse)
async def delete_post(
    request: Request,
    store: BlogStore = Depends(get_store),
) -> schemas.DeletePostResponse:
    payload = await decode_body(request, schemas.DeletePostRequest)
    require(payload.id)
    return await service.delete_post(store, payload)
