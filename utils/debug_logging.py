"""
Lightweight structured debug logging.

Enabled when DEBUG_LOG_PATH env var is set. Intended for tracing how the
best-of-N searches converge without polluting normal logs.
"""

from __future__ import annotations

import json
import os
import time
from typing import Any


def debug_log(
    event: str,
    location: str,
    data: dict[str, Any] | None = None,
) -> None:
    """
    Append a JSONL debug entry to DEBUG_LOG_PATH if configured.
    """
    path = os.getenv("DEBUG_LOG_PATH")
    if not path:
        return

    payload = {
        "event": event,
        "timestamp": int(time.time() * 1000),
        "location": location,
        "data": data or {},
    }

    try:
        with open(path, "a", encoding="utf-8") as f:
            f.write(json.dumps(payload) + "\n")
    except OSError:
        # Tracing must never break a balancing call
        return
