"""Order ID generation.

Order IDs are random 128-bit UUIDs (version 4) in canonical hyphenated form.
No coordination across processes is needed: orders are never persisted.

INVARIANT: IDs are permanent. Once generated, an ID never changes.
"""

from __future__ import annotations

import uuid


def generate_order_id() -> str:
    """Return a fresh random order ID."""
    return str(uuid.uuid4())
