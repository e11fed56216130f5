from enum import Enum


class Missing(Enum):
    """Marks an argument the caller did not pass. ``None`` is a real value."""

    MISSING = "MISSING"

    def __repr__(self):
        return "MISSING"

    def __bool__(self):
        return False


MISSING = Missing.MISSING
