"""Core identifier types for introspect."""

from __future__ import annotations

import uuid
from typing import NewType

SessionId = NewType("SessionId", str)


def generate_id() -> str:
    """Generate a unique identifier (UUID4)."""
    return str(uuid.uuid4())


def generate_session_id() -> SessionId:
    """Generate a new SessionId."""
    return SessionId(generate_id())
