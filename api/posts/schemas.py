"""
Post API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from core.requests import RequestBody
from store import Post


class GetPostRequest(RequestBody):
    id: str = ""


class GetPostResponse(BaseModel):
    post: Post | None = None


class GetAllPostsRequest(RequestBody):
    user_id: str = ""


class GetAllPostsResponse(BaseModel):
    posts: list[Post] = Field(default_factory=list)


class CreatePostRequest(RequestBody):
    user_id: str = ""
    title: str = ""
    content: str = ""


class CreatePostResponse(BaseModel):
    id: str


class UpdatePostRequest(RequestBody):
    # user_id is not accepted: a post never changes owner.
    id: str = ""
    title: str = ""
    content: str = ""


class UpdatePostResponse(BaseModel):
    id: str


class DeletePostRequest(RequestBody):
    id: str = ""


class DeletePostResponse(BaseModel):
    id: str
