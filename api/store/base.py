"""
Storage contract shared by every blog store implementation.

Update operations take `None` for "leave this field unchanged".
Lookups return `None` when nothing matches; that is not an error.
"""

from __future__ import annotations

from typing import Protocol

from .models import Post, User


class UserStore(Protocol):
    async def get_user(self, user_id: str) -> User | None: ...

    async def create_user(self, name: str, email: str) -> str: ...

    async def update_user(
        self,
        user_id: str,
        *,
        name: str | None = None,
        email: str | None = None,
    ) -> str: ...

    async def delete_user(self, user_id: str) -> str: ...


class PostStore(Protocol):
    async def get_post(self, post_id: str) -> Post | None: ...

    async def get_all_posts(self, user_id: str) -> list[Post]: ...

    async def create_post(self, user_id: str, title: str, content: str) -> str: ...

    async def update_post(
        self,
        post_id: str,
        *,
        title: str | None = None,
        content: str | None = None,
    ) -> str: ...

    async def delete_post(self, post_id: str) -> str: ...


class BlogStore(UserStore, PostStore, Protocol):
    pass
