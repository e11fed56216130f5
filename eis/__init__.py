from .clone import structural_clone
from .errors import CloneError, EisError, FreezeError, FrozenStateError
from .frozen import StateDict, StateList, deep_freeze, is_deep_frozen
from .kinds import Kind, kind_of
from .options import StoreOptions
from .sentinel import MISSING
from .store import Store, eis
from .topics import Diagnostic

__all__ = [
    "MISSING",
    "CloneError",
    "Diagnostic",
    "EisError",
    "FreezeError",
    "FrozenStateError",
    "Kind",
    "StateDict",
    "StateList",
    "Store",
    "StoreOptions",
    "deep_freeze",
    "eis",
    "is_deep_frozen",
    "kind_of",
    "structural_clone",
]
