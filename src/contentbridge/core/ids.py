from __future__ import annotations

import uuid


def new_uuid() -> str:
    """Generate a new UUID4 as a string."""
    return str(uuid.uuid4())


def new_request_id() -> str:
    """Short correlation id for a single channel call."""
    return uuid.uuid4().hex[:12]
