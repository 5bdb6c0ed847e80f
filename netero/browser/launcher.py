import json
import logging
from pathlib import Path
from typing import List, Optional

from playwright.sync_api import BrowserContext, Page, Playwright

from netero.models.cookie import Cookie

logger = logging.getLogger(__name__)


def theme_preferences(theme: Optional[str]) -> dict:
    """Chromium profile preferences that pin the UI and devtools theme."""
    dark = theme == "dark"
    return {
        "browser": {
            "theme": {
                "color_scheme2": 2 if dark else 1,
            },
        },
        "devtools": {
            "synced_preferences_sync_disabled": {
                # Chromium stores this one as a JSON-encoded string
                "ui-theme": '"dark"' if dark else '"light"',
            },
        },
    }


def write_preferences(profile_dir: Path, theme: Optional[str]) -> Path:
    prefs_file = Path(profile_dir) / "Default" / "Preferences"
    prefs_file.parent.mkdir(parents=True, exist_ok=True)
    prefs_file.write_text(json.dumps(theme_preferences(theme), indent=2), encoding="utf-8")
    return prefs_file


def launch_context(
    playwright: Playwright,
    profile_dir: Path,
    theme: Optional[str] = None,
    headless: bool = True,
    timeout: Optional[float] = None,
) -> BrowserContext:
    """
    Launches Chromium on a fresh persistent profile.
    The caller owns ``profile_dir`` and removes it after the context closes.
    """
    write_preferences(profile_dir, theme)
    mode = "headless" if headless else "headed"
    logger.info("Launching %s Chromium (theme=%s) in %s", mode, theme or "default", profile_dir)

    context = playwright.chromium.launch_persistent_context(
        str(profile_dir),
        headless=headless,
        viewport=None,
        color_scheme=theme,
        ignore_default_args=["--enable-automation"],
    )
    if timeout is not None:
        context.set_default_timeout(timeout)
    return context


def restore_cookies(context: BrowserContext, cookies: Optional[List[Cookie]]) -> None:
    if not cookies:
        return
    logger.info("Restoring %d cookies", len(cookies))
    context.add_cookies([c.to_playwright() for c in cookies])


def export_cookies(context: BrowserContext) -> List[Cookie]:
    return [Cookie.from_playwright(c) for c in context.cookies()]


def close_pages(pages: List[Page]) -> None:
    # Blank startup pages are independent of each other; order is irrelevant
    for page in pages:
        page.close()
