"""
Storage error kinds.

Request-level failures (malformed body, missing required fields) never get
this far; they are raised as HTTP 400s while decoding the request.
"""

from __future__ import annotations


class StoreError(RuntimeError):
    pass


class NotFoundError(StoreError):
    """The entity targeted by an update or delete does not exist."""


class ConstraintViolationError(StoreError):
    """A uniqueness or referential-integrity constraint rejected the write."""


class InfrastructureError(StoreError):
    """Connection, protocol or decode failure at the database boundary."""
