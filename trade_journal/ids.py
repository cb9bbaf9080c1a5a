"""Trade id generation."""
import uuid


def generate_id() -> str:
    """Return a new random trade id (32 lowercase hex chars)."""
    return uuid.uuid4().hex
