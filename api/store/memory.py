"""
Dict-backed blog store.

Honours the same constraints as the Postgres schema (unique email, posts
must reference an existing user, deleting a user cascades to its posts) so
handlers behave identically against either store. Each operation runs
without awaiting, which makes it atomic on the event loop.
"""

from __future__ import annotations

from core.errors import ConstraintViolationError, NotFoundError
from core.ids import IdProvider

from .models import Post, User


class InMemoryBlogStore:
    def __init__(self, id_provider: IdProvider) -> None:
        self.id_provider = id_provider
        self._users: dict[str, User] = {}
        self._posts: dict[str, Post] = {}

    def _check_unique_email(self, email: str, *, user_id: str | None = None) -> None:
        for existing in self._users.values():
            if existing.email == email and existing.id != user_id:
                raise ConstraintViolationError(
                    f'duplicate key value violates unique constraint "users_email_key": {email}'
                )

    # users

    async def get_user(self, user_id: str) -> User | None:
        user = self._users.get(user_id)
        return user.model_copy() if user is not None else None

    async def create_user(self, name: str, email: str) -> str:
        user_id = self.id_provider.new_id()
        if user_id in self._users:
            raise ConstraintViolationError(
                f'error while inserting user: duplicate key value violates unique constraint "users_pkey": {user_id}'
            )
        try:
            self._check_unique_email(email)
        except ConstraintViolationError as exc:
            raise ConstraintViolationError(f"error while inserting user: {exc}") from exc

        self._users[user_id] = User(id=user_id, name=name, email=email)
        return user_id

    async def update_user(
        self,
        user_id: str,
        *,
        name: str | None = None,
        email: str | None = None,
    ) -> str:
        user = self._users.get(user_id)
        if user is None:
            raise NotFoundError("user doesn't exist - create one first")

        if email is not None:
            try:
                self._check_unique_email(email, user_id=user_id)
            except ConstraintViolationError as exc:
                raise ConstraintViolationError(f"error while updating user: {exc}") from exc
            user.email = email
        if name is not None:
            user.name = name
        return user_id

    async def delete_user(self, user_id: str) -> str:
        if self._users.pop(user_id, None) is None:
            raise NotFoundError(f"user does not exist for ID: {user_id}")

        owned = [post_id for post_id, post in self._posts.items() if post.user_id == user_id]
        for post_id in owned:
            del self._posts[post_id]
        return user_id

    # posts

    async def get_post(self, post_id: str) -> Post | None:
        post = self._posts.get(post_id)
        return post.model_copy() if post is not None else None

    async def get_all_posts(self, user_id: str) -> list[Post]:
        return [post.model_copy() for post in self._posts.values() if post.user_id == user_id]

    async def create_post(self, user_id: str, title: str, content: str) -> str:
        if user_id not in self._users:
            raise ConstraintViolationError(
                "error creating new post: insert or update on table \"posts\" violates "
                f'foreign key constraint "posts_user_id_fkey": user_id={user_id}'
            )

        post_id = self.id_provider.new_id()
        if post_id in self._posts:
            raise ConstraintViolationError(
                f'error creating new post: duplicate key value violates unique constraint "posts_pkey": {post_id}'
            )
        self._posts[post_id] = Post(id=post_id, user_id=user_id, title=title, content=content)
        return post_id

    async def update_post(
        self,
        post_id: str,
        *,
        title: str | None = None,
        content: str | None = None,
    ) -> str:
        post = self._posts.get(post_id)
        if post is None:
            raise NotFoundError(f"post doesn't exist for ID: {post_id}")

        if title is not None:
            post.title = title
        if content is not None:
            post.content = content
        return post_id

    async def delete_post(self, post_id: str) -> str:
        if self._posts.pop(post_id, None) is None:
            raise NotFoundError("cannot delete post that doesn't exist")
        return post_id
