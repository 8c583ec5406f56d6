"""Runtime configuration defaults for the site and health check."""

from __future__ import annotations

import os

APP_VERSION = "1.0.0"

# Override with BURGER_PALACE_ENV, reported by the /health page.
ENVIRONMENT = os.environ.get("BURGER_PALACE_ENV", "").strip() or "development"

# Textual owns the terminal, so debug logging goes to a file.
DEBUG_LOG_PATH = os.environ.get("BURGER_PALACE_DEBUG_LOG", "").strip() or "/tmp/burger-palace-debug.log"

HEALTH_PATH = "/health"

ADDED_TO_CART_TIMEOUT_SECONDS = 2.0
ORDER_PLACED_TIMEOUT_SECONDS = 3.0
MESSAGE_SENT_TIMEOUT_SECONDS = 3.0
