"""Liveness report for the ``/health`` route."""

from __future__ import annotations

import time
from datetime import datetime, timezone

from burger_palace.config import APP_VERSION, ENVIRONMENT, HEALTH_PATH

_STARTED_AT = time.monotonic()

HEALTH_ROUTE = "health"
SITE_ROUTE = "site"


def resolve_route(path: str | None) -> str:
    """Pick the view for a request path: the health page or the site."""
    if path is None:
        return SITE_ROUTE
    normalized = path.strip()
    if len(normalized) > 1:
        normalized = normalized.rstrip("/")
    if normalized == HEALTH_PATH:
        return HEALTH_ROUTE
    return SITE_ROUTE


def uptime_seconds() -> float:
    return round(time.monotonic() - _STARTED_AT, 3)


def health_report(now: datetime | None = None) -> dict[str, object]:
    """Build the liveness payload shown on the health page."""
    timestamp = (now or datetime.now(timezone.utc)).isoformat()
    return {
        "status": "healthy",
        "timestamp": timestamp,
        "version": APP_VERSION,
        "environment": ENVIRONMENT,
        "uptime": uptime_seconds(),
    }
