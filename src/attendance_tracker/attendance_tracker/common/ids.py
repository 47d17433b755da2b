from __future__ import annotations

import uuid


def new_id() -> str:
    """Short opaque identifier for users, records and alerts."""
    return uuid.uuid4().hex[:10]
