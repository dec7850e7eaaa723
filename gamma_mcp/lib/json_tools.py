# gamma_mcp/lib/json_tools.py
from typing import Any


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == {} or value == []


def _prune(value: Any) -> Any:
    if isinstance(value, dict):
        out = {}
        for k, v in value.items():
            cleaned = _prune(v)
            if not _is_empty(cleaned):
                out[k] = cleaned
        return out
    if isinstance(value, (list, tuple)):
        return [c for c in (_prune(v) for v in value) if not _is_empty(c)]
    return value


def prune_empty(value: Any) -> Any:
    """
    Recursively drop None, empty strings, and dicts/lists that end up empty.
    0 and False are real values and are kept. Idempotent.
    """
    return _prune(value)
