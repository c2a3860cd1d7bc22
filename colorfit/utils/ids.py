"""
ColorFit ID Utilities
Request IDs for tracing and item id sequences for callers that own item lifecycle.
"""
import uuid
from datetime import datetime


def generate_request_id(prefix: str = "cf") -> str:
    """
    Generate a unique request ID for tracking.

    Args:
        prefix: Short tag identifying the operation family

    Returns:
        Unique request ID string
    """
    timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
    short_uuid = str(uuid.uuid4())[:8]
    return f"{prefix}-{timestamp}-{short_uuid}"


class ItemIdSequence:
    """
    Monotonically increasing item identifiers.

    Owned by whoever creates items (template instantiation, API handlers);
    the assignment engine only ever receives already-identified items.
    """

    def __init__(self, start: int = 1):
        self._next = start

    def __call__(self) -> int:
        value = self._next
        self._next += 1
        return value

    def peek(self) -> int:
        """Return the id the next call will issue."""
        return self._next
