import logging
import tempfile
from pathlib import Path
from typing import Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from netero.browser.launcher import close_pages, export_cookies, launch_context, restore_cookies
from netero.browser.reload import RELOAD_ALL, ReloadChannel
from netero.executor.executor import ActionExecutor
from netero.models.scenario import Configuration
from netero.runner.runner import RunResult, ScenarioRunner
from netero.session.base import SessionStateProvider, TabAddress
from netero.session.store import FileSessionStore

logger = logging.getLogger(__name__)

POLL_INTERVAL_MS = 250


def run_scenario(
    config: Configuration,
    scenario_name: str,
    state_dir: Path,
    theme: Optional[str] = None,
    headless: bool = True,
    timeout: Optional[float] = None,
    store: Optional[SessionStateProvider] = None,
    addr: Optional[TabAddress] = None,
) -> RunResult:
    """
    Restores the active tab, replays one scenario and saves the tab back.
    Session state is written only when every step passed.
    """
    # Unknown scenarios fail before a browser is started
    config.scenario(scenario_name)

    if store is None:
        store = FileSessionStore(state_dir)
    if addr is None:
        addr = store.active_address()

    with sync_playwright() as p, tempfile.TemporaryDirectory(prefix="netero-profile-") as profile_dir:
        context = launch_context(p, Path(profile_dir), theme=theme, headless=headless, timeout=timeout)
        try:
            restore_cookies(context, store.read_cookies(addr))
            page = context.new_page()

            url = store.read_url(addr)
            if url:
                logger.info("Restoring tab at %s", url)
                page.goto(url)

            runner = ScenarioRunner(config, ActionExecutor(page, state_dir, timeout=timeout))
            result = runner.run(scenario_name)

            if result.success:
                store.write_url(addr, page.url)
                store.write_cookies(addr, export_cookies(context))
                logger.info("Saved session state for browser %s tab %s", addr.browser, addr.tab)
        finally:
            context.close()

    return result


def open_browser(
    state_dir: Path,
    channel: ReloadChannel,
    theme: Optional[str] = None,
    store: Optional[SessionStateProvider] = None,
) -> None:
    """Opens the active tab in a visible browser and reloads it on request.

    Returns once the user closes the browser.
    """
    if store is None:
        store = FileSessionStore(state_dir)
    addr = store.active_address()

    with sync_playwright() as p, tempfile.TemporaryDirectory(prefix="netero-profile-") as profile_dir:
        context = launch_context(p, Path(profile_dir), theme=theme, headless=False)
        closed = []
        context.on("close", lambda _: closed.append(True))

        restore_cookies(context, store.read_cookies(addr))

        empty_pages = list(context.pages)
        page = context.new_page()
        url = store.read_url(addr)
        if url:
            page.goto(url)
        close_pages(empty_pages)

        with channel:
            while not closed:
                message = channel.poll()
                try:
                    if message and RELOAD_ALL in message:
                        logger.info("Reloading %d pages", len(context.pages))
                        for open_page in context.pages:
                            open_page.reload()
                    elif message:
                        logger.debug("Ignoring message %r", message)

                    if not context.pages:
                        break
                    # Close events are only dispatched while Playwright is waiting
                    context.pages[0].wait_for_timeout(POLL_INTERVAL_MS)
                except PlaywrightError as e:
                    logger.debug("Browser went away: %s", e)
                    break

    logger.info("Browser closed")
