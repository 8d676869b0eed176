from .base import BlogStore, PostStore, UserStore
from .memory import InMemoryBlogStore
from .models import Post, User
from .postgres import PostgresBlogStore

__all__ = [
    "BlogStore",
    "InMemoryBlogStore",
    "Post",
    "PostStore",
    "PostgresBlogStore",
    "User",
    "UserStore",
]
