"""
Utility functions for the application.
"""
import secrets
import string
import uuid


ROOM_KEY_ALPHABET = string.ascii_uppercase + string.digits


def generate_uuid() -> str:
    """Generate a random identifier for members and payments."""
    return str(uuid.uuid4())


def generate_room_key(length: int) -> str:
    """Generate a short, human-shareable room key."""
    return "".join(secrets.choice(ROOM_KEY_ALPHABET) for _ in range(length))
