from enum import Enum


class Alignment(str, Enum):
    progressive = "progressive"
    moderate = "moderate"
    conservative = "conservative"


class ChatRole(str, Enum):
    system = "system"
    user = "user"
    assistant = "assistant"


def parse_alignment(value: str | None) -> Alignment | None:
    """Lenient label lookup: trims and lowercases, returns None for unknown labels."""

    if value is None:
        return None
    try:
        return Alignment(value.strip().lower())
    except ValueError:
        return None
