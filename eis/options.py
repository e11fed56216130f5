from pydantic.dataclasses import dataclass

from . import config


@dataclass
class StoreOptions:
    strict: bool = config.STRICT_MODE  # freeze stored composites
    dev: bool = config.DEV_MODE  # log non-fatal diagnostics
    name: str = config.STORE_NAME
    max_safe_integer: int = config.MAX_SAFE_INTEGER
    max_depth: int = config.MAX_DEPTH

    def __post_init__(self):
        if self.max_safe_integer <= 0:
            raise ValueError("max_safe_integer must be positive")
        if self.max_depth <= 0:
            raise ValueError("max_depth must be positive")
        if not self.name:
            raise ValueError("Store name cannot be empty")
