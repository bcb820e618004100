"""Small utility functions."""

import hashlib
import json
import sys
from typing import Any


def hash_text(text: str) -> str:
    """Create a stable hash of text content."""
    return hashlib.sha256(text.encode('utf-8')).hexdigest()[:16]


def safe_json(obj: Any) -> str:
    """Safely serialize object to JSON, handling dataclasses and properties."""
    def serialize_item(item):
        if hasattr(item, '__dataclass_fields__'):
            return {k: serialize_item(getattr(item, k)) for k in item.__dataclass_fields__}
        elif isinstance(item, (list, tuple)):
            return [serialize_item(x) for x in item]
        elif isinstance(item, dict):
            return {k: serialize_item(v) for k, v in item.items()}
        else:
            return item

    try:
        return json.dumps(serialize_item(obj), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        return f"<serialization error: {e}>"


class SimpleConsoleLogger:
    """Simple console logger for the command line. Writes to stderr."""

    def info(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"INFO: {msg} {details}" if details else f"INFO: {msg}", file=sys.stderr)

    def warn(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"WARN: {msg} {details}" if details else f"WARN: {msg}", file=sys.stderr)

    def error(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"ERROR: {msg} {details}" if details else f"ERROR: {msg}", file=sys.stderr)
