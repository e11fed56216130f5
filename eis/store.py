import math
from collections.abc import Callable
from typing import Any, Iterator

from .clone import structural_clone
from .diagnostics import Reporter
from .errors import CloneError
from .frozen import deep_freeze
from .kinds import PRIMITIVE_TYPES, is_composite
from .options import StoreOptions
from .sentinel import MISSING
from .topics import Diagnostic

Listener = Callable[[Any], None]
Unsubscribe = Callable[[], None]


def _noop():
    pass


def _same_value(a: Any, b: Any) -> bool:
    if a is b:
        return True
    # primitives compare by value, composites by reference
    if not isinstance(a, PRIMITIVE_TYPES) or type(a) is not type(b) or a != b:
        return False
    if isinstance(a, float):
        # 0.0 and -0.0 are different values
        return math.copysign(1.0, a) == math.copysign(1.0, b)
    return True


class Store:
    """
    Holds a single value, keeps it immutable and notifies listeners on change

    Composites are cloned on the way in and deep-frozen, so neither the value
    passed to ``set`` nor the one returned by ``get`` can be used to mutate
    the store. Listeners are called synchronously, in registration order, and
    a failing listener never stops the others.

    A store unpacks into its three operations::

        get, set, subscribe = Store({"count": 0})
    """

    def __init__(self, initial_state: Any = MISSING, options: StoreOptions | None = None):
        self.options = options if options is not None else StoreOptions()
        self._reporter = Reporter(self.options.name, self.options.dev)
        self._listeners: dict[int, Listener] = {}

        if initial_state is MISSING:
            self._reporter.error(
                Diagnostic.INIT_ERROR,
                "initial_state cannot be missing. Falling back to None.",
            )
            initial_state = None

        try:
            self._state = self._normalize(initial_state)
        except CloneError as e:
            self._reporter.fatal(Diagnostic.CLONE_ERROR, f"Cannot create store. {e}")
            raise

    def __iter__(self) -> Iterator[Callable]:
        return iter((self.get, self.set, self.subscribe))

    def __repr__(self):
        return f"{self.__class__.__name__}({self._state!r})"

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _normalize(self, value: Any) -> Any:
        state = structural_clone(
            value, self.options.max_safe_integer, self.options.max_depth
        )
        if self.options.strict and is_composite(state):
            deep_freeze(state, self._reporter)
        return state

    def get(self) -> Any:
        return self._state

    def set(self, value: Any = MISSING) -> bool:
        """
        Replace the state with ``value``, or with ``value(state)`` when it is
        callable, then notify every listener.

        Returns True if the state was replaced. Missing values, updaters that
        return nothing and values identical to the current state leave the
        store untouched and notify nobody. Exceptions raised by an updater
        propagate.
        """
        if value is MISSING:
            self._reporter.error(
                Diagnostic.SET_ERROR,
                "set() requires a new state value or an updater function. "
                "Received nothing.",
            )
            return False

        is_updater = callable(value)
        next_state = value(self._state) if is_updater else value

        if next_state is MISSING or (is_updater and next_state is None):
            self._reporter.warning(
                Diagnostic.NO_OP,
                "set() could not update state. Updater returned nothing.",
            )
            return False

        if _same_value(next_state, self._state):
            self._reporter.warning(
                Diagnostic.NO_OP,
                "set() was called, but the new state is the same as the "
                "current state. State was not updated.",
            )
            return False

        try:
            normalized = self._normalize(next_state)
        except CloneError as e:
            self._reporter.error(Diagnostic.CLONE_ERROR, str(e))
            self._reporter.error(
                Diagnostic.SET_ERROR, "Cannot set state due to non-serializable value."
            )
            return False

        self._state = normalized
        self._notify(normalized)
        return True

    def subscribe(self, listener: Listener, invoke_immediately: bool = False) -> Unsubscribe:
        """
        Register ``listener`` and return a handle that removes it.

        Subscribing the same callable twice keeps a single registration. The
        handle is idempotent and only ever removes this listener.
        """
        if not callable(listener):
            self._reporter.error(
                Diagnostic.SUBSCRIBE_ERROR,
                "Listener must be callable. "
                f"Received: {type(listener).__name__}. Subscription was ignored.",
            )
            return _noop

        key = id(listener)
        self._listeners[key] = listener

        if invoke_immediately:
            self._call(listener, self._state)

        def unsubscribe():
            if self._listeners.get(key) is listener:
                del self._listeners[key]

        return unsubscribe

    def _notify(self, state: Any):
        listeners = list(self._listeners.items())
        self._reporter.debug(
            Diagnostic.NOTIFY, f"Notifying {len(listeners)} listener(s)"
        )
        for key, listener in listeners:
            # removed by an earlier listener during this pass
            if self._listeners.get(key) is not listener:
                continue
            self._call(listener, state)

    def _call(self, listener: Listener, state: Any):
        try:
            listener(state)
        except Exception as e:
            self._reporter.error(
                Diagnostic.LISTENER_ERROR,
                f"{getattr(listener, '__name__', repr(listener))} raised {e!r}",
                exception=e,
            )


def eis(initial_state: Any = MISSING, **options) -> Store:
    """Create a store. Options: strict, dev, name, max_safe_integer, max_depth."""
    return Store(initial_state, StoreOptions(**options))
