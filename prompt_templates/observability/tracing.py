"""Minimal structured event logging.

One JSON object per line on stdout, switched on with
``PROMPT_TEMPLATES_LOG_EVENTS=1``. Failures are never logged here; they
propagate to the caller.
"""

from __future__ import annotations

import json
from typing import Any

from prompt_templates.config import settings


def log_event(event: str, **fields: Any) -> None:
    if not settings.log_events:
        return
    payload: dict[str, Any] = {'event': event, **fields}
    print(json.dumps(payload, ensure_ascii=False, default=str))
