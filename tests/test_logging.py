"""Debug log file setup and the events the site writes to it."""

import logging

import pytest

from burger_palace.data import ALL_ITEMS
from burger_palace.main import configure_logging
from burger_palace.menu_section import MenuSection
from burger_palace.site_app import SiteApp


@pytest.fixture
def site_logger():
    logger = logging.getLogger("burger_palace")
    existing = list(logger.handlers)
    yield logger
    for handler in list(logger.handlers):
        if handler not in existing:
            logger.removeHandler(handler)
            handler.close()


def test_configure_logging_writes_to_file(tmp_path, site_logger):
    log_path = tmp_path / "logs" / "debug.log"
    configure_logging(str(log_path))

    logging.getLogger("burger_palace.menu_section").debug("hello")
    for handler in site_logger.handlers:
        handler.flush()

    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert "burger_palace.menu_section DEBUG hello" in lines[0]


def test_configure_logging_twice_keeps_one_handler(tmp_path, site_logger):
    log_path = tmp_path / "debug.log"
    configure_logging(str(log_path))
    configure_logging(str(log_path))

    logging.getLogger("burger_palace.menu_section").debug("hello")
    for handler in site_logger.handlers:
        handler.flush()

    file_handlers = [h for h in site_logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert len(log_path.read_text(encoding="utf-8").splitlines()) == 1


@pytest.mark.asyncio
async def test_menu_actions_emit_debug_events(caplog, notifier, navigator):
    caplog.set_level(logging.DEBUG, logger="burger_palace")
    app = SiteApp(notifier=notifier, navigator=navigator)
    async with app.run_test():
        menu = app.query_one(MenuSection)
        menu.select_category("drinks")
        menu.add_to_cart(ALL_ITEMS[0])
        menu.place_order()

    messages = [r.getMessage() for r in caplog.records if r.name == "burger_palace.menu_section"]
    assert any(m.startswith("select_category category='drinks'") for m in messages)
    assert any(m.startswith("add_to_cart item_id=1") for m in messages)
    assert any(m.startswith("place_order summary=") for m in messages)


@pytest.mark.asyncio
async def test_navigation_and_contact_emit_debug_events(caplog, notifier):
    caplog.set_level(logging.DEBUG, logger="burger_palace")
    app = SiteApp(notifier=notifier)
    async with app.run_test() as pilot:
        app.action_go("menu")
        app.action_go("desserts")
        app.query_one("#send-message").press()
        await pilot.pause()

    messages = [r.getMessage() for r in caplog.records]
    assert "navigate section='menu'" in messages
    assert "navigate_skipped section='desserts' reason=missing" in messages
    assert "contact_rejected missing=['name', 'email', 'message']" in messages
