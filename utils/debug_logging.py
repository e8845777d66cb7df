"""
Lightweight structured trace of optimizer decisions.

Enabled when the MATCHMAKING_TRACE_PATH env var is set. Intended for diagnosing
skewed role pools (e.g. why a batch fell back to repair mode) without
polluting normal logs.
"""

from __future__ import annotations

import json
import os
import time
from typing import Any


def trace_event(
    event: str,
    location: str,
    message: str,
    data: dict[str, Any] | None = None,
    *,
    run_id: str = "run1",
) -> None:
    """
    Append a JSONL trace entry to MATCHMAKING_TRACE_PATH if configured.
    """
    path = os.getenv("MATCHMAKING_TRACE_PATH")
    if not path:
        return

    payload = {
        "runId": run_id,
        "event": event,
        "timestamp": int(time.time() * 1000),
        "location": location,
        "message": message,
        "data": data or {},
    }

    try:
        with open(path, "a", encoding="utf-8") as f:
            f.write(json.dumps(payload, default=str) + "\n")
    except OSError:
        # Tracing must never impact matchmaking
        return
