class EisError(Exception):
    """Base class for errors raised by the state container."""


class CloneError(EisError):
    """The value cannot be represented as plain data (JSON-like)."""


class FreezeError(EisError):
    """The value cannot be frozen in place."""


class FrozenStateError(EisError, TypeError):
    """A mutation was attempted on frozen state."""
