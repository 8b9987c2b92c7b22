"""Opt-in logging of outgoing GraphQL requests (STOP_CATALOG_LOG_REQUESTS=true)."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

REDACTED_HEADERS = frozenset({"authorization", "cookie", "digitransit-subscription-key"})


def should_log_requests() -> bool:
    """Check if STOP_CATALOG_LOG_REQUESTS is set to true."""
    return os.getenv("STOP_CATALOG_LOG_REQUESTS", "").lower() == "true"


def log_api_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    payload: dict[str, Any] | None = None,
    priority: str | None = None,
) -> None:
    """Log an outgoing request, with credential headers redacted.

    The GraphQL document and its variables are logged on separate lines.
    """
    if not should_log_requests():
        return

    lines = [f"{method} {url}" + (f" [{priority}]" if priority else "")]
    if headers:
        safe = {
            name: "***REDACTED***" if name.lower() in REDACTED_HEADERS else value
            for name, value in headers.items()
        }
        lines.append(f"Headers: {json.dumps(safe)}")
    if payload:
        lines.append(f"Query: {' '.join(str(payload.get('query', '')).split())}")
        lines.append(f"Variables: {json.dumps(payload.get('variables') or {})}")

    logger.info("API Request:\n" + "\n".join(lines))
