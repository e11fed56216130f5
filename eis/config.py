import os


def _flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in ("0", "false", "no", "off", "")


STORE_NAME = os.getenv("EIS_STORE_NAME", "EIS")
DEV_MODE = _flag("EIS_DEV", True)
STRICT_MODE = _flag("EIS_STRICT", True)

# Largest integer a JSON number carries without loss (2**53 - 1)
MAX_SAFE_INTEGER = 9_007_199_254_740_991

# Deepest nesting accepted, within reach of the json encoder
MAX_DEPTH = 900
