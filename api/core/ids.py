"""
Identifier providers for newly created entities.
"""

from __future__ import annotations

import uuid
from typing import Protocol


class IdProvider(Protocol):
    def new_id(self) -> str: ...


class UuidProvider:
    def new_id(self) -> str:
        return str(uuid.uuid4())
