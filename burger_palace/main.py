"""Entry point: route to the site or the health page."""

from __future__ import annotations

import argparse
import json
import logging
import os
from pathlib import Path

from burger_palace.config import DEBUG_LOG_PATH, HEALTH_PATH
from burger_palace.health import HEALTH_ROUTE, health_report, resolve_route

log = logging.getLogger("burger_palace")


def configure_logging(path: str = DEBUG_LOG_PATH) -> None:
    """Send debug logs to a file; the terminal belongs to Textual."""
    log_file = Path(path)
    target = os.path.abspath(log_file)
    for existing in log.handlers:
        if isinstance(existing, logging.FileHandler) and existing.baseFilename == target:
            return
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    log.addHandler(handler)
    log.setLevel(logging.DEBUG)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="burger-palace", description="Burger Palace restaurant site.")
    parser.add_argument("path", nargs="?", default="/", help=f"page path to open; {HEALTH_PATH} shows the liveness page")
    parser.add_argument("--json", action="store_true", help="print the health report as JSON instead of opening the UI")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the Textual application."""
    parser = build_parser()
    args = parser.parse_args(argv)
    route = resolve_route(args.path)
    if args.json and route != HEALTH_ROUTE:
        parser.error(f"--json is only available for {HEALTH_PATH}")

    if route == HEALTH_ROUTE and args.json:
        print(json.dumps(health_report()))
        return

    configure_logging()
    log.debug("start path=%r route=%r", args.path, route)

    if route == HEALTH_ROUTE:
        from burger_palace.health_screen import HealthCheckApp

        HealthCheckApp().run()
        return

    from burger_palace.site_app import SiteApp

    SiteApp().run()


if __name__ == "__main__":
    main()
