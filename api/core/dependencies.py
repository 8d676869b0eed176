"""
Shared FastAPI dependencies.
"""

from __future__ import annotations

from fastapi import Request

from store import BlogStore


def get_store(request: Request) -> BlogStore:
    # Built by the app lifespan (or injected by create_app).
    return request.app.state.store
