import functools
from typing import Any

from .diagnostics import Reporter, default_reporter
from .errors import FreezeError, FrozenStateError
from .kinds import Kind, children_of, kind_of
from .topics import Diagnostic


def _guard(method):
    @functools.wraps(method)
    def guarded(self, *args, **kwargs):
        if self._frozen:
            raise FrozenStateError(
                f"Cannot call {method.__name__}() on frozen {type(self).__name__}"
            )
        return method(self, *args, **kwargs)

    return guarded


def _guard_mutators(base: type, names: tuple[str, ...]):
    def decorate(cls):
        for name in names:
            setattr(cls, name, _guard(getattr(base, name)))
        return cls

    return decorate


class _Freezable:
    __slots__ = ()

    def __new__(cls, *args, **kwargs):
        self = super().__new__(cls, *args, **kwargs)
        object.__setattr__(self, "_frozen", False)
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self):
        """Mark this container (not its children) as immutable."""
        object.__setattr__(self, "_frozen", True)
        return self

    def __setattr__(self, name: str, value: Any):
        if self._frozen:
            raise FrozenStateError(f"Cannot set attribute on frozen {type(self).__name__}")
        super().__setattr__(name, value)

    def __delattr__(self, name: str):
        if self._frozen or name == "_frozen":
            raise FrozenStateError(f"Cannot delete attribute of {type(self).__name__}")
        super().__delattr__(name)


@_guard_mutators(
    dict,
    (
        "__init__",
        "__setitem__",
        "__delitem__",
        "__ior__",
        "clear",
        "pop",
        "popitem",
        "setdefault",
        "update",
    ),
)
class StateDict(_Freezable, dict):
    """dict that rejects every mutation once frozen."""

    __slots__ = ("_frozen",)

    def __copy__(self):
        return StateDict(self)

    def __deepcopy__(self, memo):
        # copies come back unfrozen
        from .clone import structural_clone

        return structural_clone(self)

    def __reduce__(self):
        return (StateDict, (dict(self),))

    def __repr__(self):
        return f"{type(self).__name__}({dict.__repr__(self)})"


@_guard_mutators(
    list,
    (
        "__init__",
        "__setitem__",
        "__delitem__",
        "__iadd__",
        "__imul__",
        "append",
        "extend",
        "insert",
        "pop",
        "remove",
        "reverse",
        "sort",
        "clear",
    ),
)
class StateList(_Freezable, list):
    """list that rejects every mutation once frozen."""

    __slots__ = ("_frozen",)

    def __copy__(self):
        return StateList(self)

    def __deepcopy__(self, memo):
        from .clone import structural_clone

        return structural_clone(self)

    def __reduce__(self):
        return (StateList, (list(self),))

    def __repr__(self):
        return f"{type(self).__name__}({list.__repr__(self)})"


def deep_freeze(value: Any, reporter: Reporter = default_reporter) -> Any:
    """
    Freeze a composite and every composite reachable from it, in place

    Children are frozen before their parent. Only values produced by
    ``structural_clone`` can be frozen; plain dicts and lists raise
    ``FreezeError``. A primitive is returned unchanged with a freeze error
    reported, since there is nothing to freeze.
    """
    if kind_of(value) is Kind.PRIMITIVE:
        reporter.error(
            Diagnostic.FREEZE_ERROR,
            "Unable to freeze value. Expected a dict or list, "
            f"got {type(value).__name__}.",
        )
        return value

    if not _needs_freeze(value):
        reporter.debug(Diagnostic.ALREADY_FROZEN, "Value is already frozen.")
        return value

    # (node, children_pushed) pairs; a node is frozen on its second visit
    stack = [(value, False)]
    visited = set()
    while stack:
        node, children_pushed = stack.pop()
        if children_pushed:
            node.freeze()
            continue
        if id(node) in visited:
            continue
        visited.add(id(node))

        stack.append((node, True))
        for child in children_of(node):
            if _needs_freeze(child):
                stack.append((child, False))

    return value


def _needs_freeze(value: Any) -> bool:
    if kind_of(value) is Kind.PRIMITIVE:
        return False
    if not isinstance(value, _Freezable):
        raise FreezeError(
            f"{type(value).__name__} cannot be frozen in place. Clone it first."
        )
    return not value.frozen


def is_deep_frozen(value: Any) -> bool:
    stack = [value]
    visited = set()
    while stack:
        node = stack.pop()
        if kind_of(node) is Kind.PRIMITIVE or id(node) in visited:
            continue
        visited.add(id(node))

        if not isinstance(node, _Freezable) or not node.frozen:
            return False
        stack.extend(children_of(node))

    return True
