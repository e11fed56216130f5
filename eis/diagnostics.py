from loguru import logger

from . import config
from .topics import Diagnostic


class Reporter:
    """
    Diagnostic channel of a store

    Every record is bound with its category and the store name, so a sink can
    filter on ``record["extra"]["category"]``. Fatal errors are reported even
    when developer mode is off.
    """

    def __init__(self, name: str = config.STORE_NAME, dev: bool = config.DEV_MODE):
        self.name = name
        self.dev = dev

    def _log(
        self,
        level: str,
        category: Diagnostic,
        message: str,
        exception: BaseException | None = None,
    ):
        logger.bind(category=category, store=self.name).opt(exception=exception).log(
            level, f"[{self.name}] {category}: {message}"
        )

    def error(self, category: Diagnostic, message: str, exception=None):
        if self.dev:
            self._log("ERROR", category, message, exception)

    def fatal(self, category: Diagnostic, message: str):
        self._log("ERROR", category, message)

    def warning(self, category: Diagnostic, message: str):
        if self.dev:
            self._log("WARNING", category, message)

    def debug(self, category: Diagnostic, message: str):
        if self.dev:
            self._log("DEBUG", category, message)


default_reporter = Reporter()
