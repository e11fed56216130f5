from collections.abc import Mapping
from enum import Enum, auto
from typing import Any

from .errors import CloneError


class Kind(Enum):
    PRIMITIVE = auto()
    SEQUENCE = auto()
    MAP = auto()


PRIMITIVE_TYPES = (type(None), bool, int, float, str)


def kind_of(value: Any) -> Kind:
    """Classify a value as primitive, sequence or map.

    Raises CloneError for anything that is not plain data.
    """
    if isinstance(value, PRIMITIVE_TYPES):
        return Kind.PRIMITIVE
    if isinstance(value, (list, tuple)):
        return Kind.SEQUENCE
    if isinstance(value, Mapping):
        return Kind.MAP

    if callable(value):
        raise CloneError(f"Callable is not serializable: {value!r}")
    raise CloneError(
        "Only plain dicts, lists and primitives are supported. "
        f"Received: {type(value).__name__}"
    )


def is_composite(value: Any) -> bool:
    try:
        return kind_of(value) is not Kind.PRIMITIVE
    except CloneError:
        return False


def children_of(value: Any):
    match kind_of(value):
        case Kind.SEQUENCE:
            return value
        case Kind.MAP:
            return value.values()
        case Kind.PRIMITIVE:
            return ()
