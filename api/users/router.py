"""
User API endpoints.

Bodies are decoded by hand (not as FastAPI body params) so malformed JSON
and missing required fields both answer 400 instead of 422.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from core.dependencies import get_store
from core.requests import decode_body, require
from store import BlogStore

from . import schemas, service

router = APIRouter()


@router.get("/users", response_model=schemas.GetUserResponse)
async def get_user(
    request: Request,
    store: BlogStore = Depends(get_store),
) -> schemas.GetUserResponse:
    payload = await decode_body(request, schemas.GetUserRequest)
    require(payload.id)
    return await service.get_user(store, payload)


@router.post("/users", response_model=schemas.CreateUserResponse)
async def create_user(
    request: Request,
    store: BlogStore = Depends(get_store),
) -> schemas.CreateUserResponse:
    payload = await decode_body(request, schemas.CreateUserRequest)
    require(payload.email)
    return await service.create_user(store, payload)


@router.put("/users", response_model=schemas.UpdateUserResponse)
async def update_user(
    request: Request,
    store: BlogStore = Depends(get_store),
) -> schemas.UpdateUserResponse:
    payload = await decode_body(request, schemas.UpdateUserRequest)
    require(payload.id)
    return await service.update_user(store, payload)


@router.delete("/users", response_model=schemas.DeleteUserResponse)
async def delete_user(
    request: Request,
    store: BlogStore = Depends(get_store),
) -> schemas.DeleteUserResponse:
    payload = await decode_body(request, schemas.DeleteUserRequest)
    require(payload.id)
    return await service.delete_user(store, payload)
