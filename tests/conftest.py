import pytest
from loguru import logger

from eis import Diagnostic


class CapturedDiagnostics:
    def __init__(self):
        self.records = []

    def sink(self, message):
        self.records.append(message.record)

    @property
    def categories(self) -> list[Diagnostic]:
        return [r["extra"].get("category") for r in self.records]

    def of(self, category: Diagnostic) -> list[dict]:
        return [r for r in self.records if r["extra"].get("category") == category]

    def has(self, category: Diagnostic, level: str | None = None) -> bool:
        return any(level is None or r["level"].name == level for r in self.of(category))


@pytest.fixture
def diagnostics():
    captured = CapturedDiagnostics()
    handler_id = logger.add(captured.sink, level="DEBUG", format="{message}")
    yield captured
    logger.remove(handler_id)
