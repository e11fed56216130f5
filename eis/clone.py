import math
from typing import Any

from . import config
from .errors import CloneError
from .frozen import StateDict, StateList
from .kinds import Kind, kind_of

_LEAVE = object()


def structural_clone(
    value: Any,
    max_safe_integer: int = config.MAX_SAFE_INTEGER,
    max_depth: int = config.MAX_DEPTH,
) -> Any:
    """
    Deep copy of plain data into fresh, unfrozen StateDict/StateList containers

    Accepts what survives a lossless JSON round trip: None, bool, str, finite
    floats, ints within +/- ``max_safe_integer``, lists, tuples, and mappings
    with str keys, nested at most ``max_depth`` levels. Anything else
    (callables, cycles, sets, custom objects) raises CloneError; a partial
    copy is never returned.
    """
    try:
        return _clone(value, max_safe_integer, max_depth)
    except MemoryError as e:
        raise CloneError(f"Value could not be copied: {e}") from e


def _clone(value: Any, max_safe_integer: int, max_depth: int) -> Any:
    root = _empty_copy(value, max_safe_integer)
    if kind_of(value) is Kind.PRIMITIVE:
        return root

    # ids of the composites on the path from the root to the current node
    path: set[int] = set()
    stack = [(value, root, 1)]
    while stack:
        source, target, depth = stack.pop()
        if source is _LEAVE:
            path.discard(target)
            continue

        if depth > max_depth:
            raise CloneError(f"Value is nested deeper than {max_depth} levels")
        if id(source) in path:
            raise CloneError("Value contains a cyclic reference")
        path.add(id(source))
        stack.append((_LEAVE, id(source), depth))

        match kind_of(source):
            case Kind.SEQUENCE:
                items = enumerate(source)
            case Kind.MAP:
                items = source.items()

        for key, item in items:
            if isinstance(target, StateDict) and not isinstance(key, str):
                raise CloneError(
                    f"Map keys must be str. Received: {type(key).__name__}"
                )
            copied = _empty_copy(item, max_safe_integer)
            if isinstance(target, StateList):
                target.append(copied)
            else:
                target[key] = copied
            if kind_of(item) is not Kind.PRIMITIVE:
                stack.append((item, copied, depth + 1))

    return root


def _empty_copy(value: Any, max_safe_integer: int) -> Any:
    match kind_of(value):
        case Kind.PRIMITIVE:
            return _check_primitive(value, max_safe_integer)
        case Kind.SEQUENCE:
            return StateList()
        case Kind.MAP:
            return StateDict()


def _check_primitive(value: Any, max_safe_integer: int) -> Any:
    if isinstance(value, bool) or value is None or isinstance(value, str):
        return value

    if isinstance(value, int):
        if abs(value) > max_safe_integer:
            raise CloneError(
                f"Integer {value} is outside the safe range (+/- {max_safe_integer})"
            )
        return value

    if not math.isfinite(value):
        raise CloneError(f"Float {value} has no serializable form")
    return value
