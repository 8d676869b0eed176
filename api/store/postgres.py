"""
Blog store persistence (raw SQL) on Postgres.

Updates and deletes are single conditional statements with `RETURNING id`:
an empty result means the row was not there, so there is no window between
an existence check and the mutation.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from core.db import Database
from core.errors import ConstraintViolationError, InfrastructureError, NotFoundError, StoreError
from core.ids import IdProvider

from .models import Post, User


def _as_uuid(value: str) -> uuid.UUID | None:
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


@contextmanager
def _wrapped(message: str) -> Iterator[None]:
    # Keep the error kind, prefix the message with what we were doing.
    try:
        yield
    except StoreError as exc:
        raise type(exc)(f"{message}: {exc}") from exc


def _row_to_user(row: dict[str, Any]) -> User:
    return User(
        id=str(row["id"]),
        name=row["name"] or "",
        email=row["email"] or "",
    )


def _row_to_post(row: dict[str, Any]) -> Post:
    return Post(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        title=row["title"] or "",
        content=row["content"] or "",
    )


class PostgresBlogStore:
    def __init__(self, database: Database, id_provider: IdProvider) -> None:
        self.database = database
        self.id_provider = id_provider

    def _new_uuid(self) -> uuid.UUID:
        new_id = self.id_provider.new_id()
        parsed = _as_uuid(new_id)
        if parsed is None:
            raise InfrastructureError(f"identifier provider returned a non-UUID id: {new_id!r}")
        return parsed

    # users

    async def get_user(self, user_id: str) -> User | None:
        key = _as_uuid(user_id)
        if key is None:
            return None

        with _wrapped("error finding user in db"):
            row = await self.database.fetch_one(
                """
                SELECT id, name, email
                FROM users
                WHERE id = $1
                """,
                key,
            )
        return _row_to_user(row) if row is not None else None

    async def create_user(self, name: str, email: str) -> str:
        key = self._new_uuid()
        with _wrapped("error while inserting user"):
            await self.database.execute(
                """
                INSERT INTO users (id, name, email)
                VALUES ($1, $2, $3)
                """,
                key,
                name,
                email,
            )
        return str(key)

    async def update_user(
        self,
        user_id: str,
        *,
        name: str | None = None,
        email: str | None = None,
    ) -> str:
        key = _as_uuid(user_id)
        row = None
        if key is not None:
            with _wrapped("error while updating user"):
                row = await self.database.fetch_one(
                    """
                    UPDATE users
                    SET name = COALESCE($2, name),
                        email = COALESCE($3, email)
                    WHERE id = $1
                    RETURNING id
                    """,
                    key,
                    name,
                    email,
                )
        if row is None:
            raise NotFoundError("user doesn't exist - create one first")
        return user_id

    async def delete_user(self, user_id: str) -> str:
        key = _as_uuid(user_id)
        row = None
        if key is not None:
            with _wrapped("error deleting user"):
                row = await self.database.fetch_one(
                    """
                    DELETE FROM users
                    WHERE id = $1
                    RETURNING id
                    """,
                    key,
                )
        if row is None:
            raise NotFoundError(f"user does not exist for ID: {user_id}")
        return user_id

    # posts

    async def get_post(self, post_id: str) -> Post | None:
        key = _as_uuid(post_id)
        if key is None:
            return None

        with _wrapped("error finding post in db"):
            row = await self.database.fetch_one(
                """
                SELECT id, user_id, title, content
                FROM posts
                WHERE id = $1
                """,
                key,
            )
        return _row_to_post(row) if row is not None else None

    async def get_all_posts(self, user_id: str) -> list[Post]:
        key = _as_uuid(user_id)
        if key is None:
            return []

        with _wrapped("failed to fetch posts for user"):
            rows = await self.database.fetch_all(
                """
                SELECT id, user_id, title, content
                FROM posts
                WHERE user_id = $1
                """,
                key,
            )
        return [_row_to_post(row) for row in rows]

    async def create_post(self, user_id: str, title: str, content: str) -> str:
        owner = _as_uuid(user_id)
        if owner is None:
            raise ConstraintViolationError(f"error creating new post: invalid user_id: {user_id}")

        key = self._new_uuid()
        with _wrapped("error creating new post"):
            await self.database.execute(
                """
                INSERT INTO posts (id, user_id, title, content)
                VALUES ($1, $2, $3, $4)
                """,
                key,
                owner,
                title,
                content,
            )
        return str(key)

    async def update_post(
        self,
        post_id: str,
        *,
        title: str | None = None,
        content: str | None = None,
    ) -> str:
        key = _as_uuid(post_id)
        row = None
        if key is not None:
            with _wrapped("error while updating post"):
                row = await self.database.fetch_one(
                    """
                    UPDATE posts
                    SET title = COALESCE($2, title),
                        content = COALESCE($3, content)
                    WHERE id = $1
                    RETURNING id
                    """,
                    key,
                    title,
                    content,
                )
        if row is None:
            raise NotFoundError(f"post doesn't exist for ID: {post_id}")
        return post_id

    async def delete_post(self, post_id: str) -> str:
        key = _as_uuid(post_id)
        row = None
        if key is not None:
            with _wrapped("error deleting post"):
                row = await self.database.fetch_one(
                    """
                    DELETE FROM posts
                    WHERE id = $1
                    RETURNING id
                    """,
                    key,
                )
        if row is None:
            raise NotFoundError("cannot delete post that doesn't exist")
        return post_id
