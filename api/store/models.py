"""
Entities handled by the blog store.
"""

from __future__ import annotations

from pydantic import BaseModel


class User(BaseModel):
    id: str
    name: str = ""
    email: str = ""


class Post(BaseModel):
    id: str
    user_id: str
    title: str = ""
    content: str = ""
