import logging
from pathlib import Path
from typing import List, Optional

from netero.models.cookie import Cookie
from netero.session import cookies as jar
from netero.session.base import SessionStateProvider, TabAddress

logger = logging.getLogger(__name__)


class FileSessionStore(SessionStateProvider):
    """
    Session state kept as plain files under the state root:

        active-browser.txt, active-tab.txt
        browser/<browser>/cookie.json   (or cookie.txt, Netscape format)
        browser/<browser>/tab/<tab>/url.txt
    """

    def __init__(self, state_dir: Path):
        self.state_dir = Path(state_dir)

    def active_address(self) -> TabAddress:
        browser = (self.state_dir / "active-browser.txt").read_text(encoding="utf-8").strip()
        tab = (self.state_dir / "active-tab.txt").read_text(encoding="utf-8").strip()
        return TabAddress(browser=browser, tab=tab)

    def browser_dir(self, addr: TabAddress) -> Path:
        return self.state_dir / "browser" / addr.browser

    def url_file(self, addr: TabAddress) -> Path:
        return self.browser_dir(addr) / "tab" / addr.tab / "url.txt"

    def read_cookies(self, addr: TabAddress) -> Optional[List[Cookie]]:
        json_file = self.browser_dir(addr) / "cookie.json"
        if json_file.exists():
            return jar.parse_json(json_file.read_text(encoding="utf-8"))

        netscape_file = self.browser_dir(addr) / "cookie.txt"
        if netscape_file.exists():
            return jar.parse_netscape(netscape_file.read_text(encoding="utf-8"))

        logger.debug("No saved cookies for %s", addr)
        return None

    def read_url(self, addr: TabAddress) -> Optional[str]:
        url_file = self.url_file(addr)
        if not url_file.exists():
            return None
        return url_file.read_text(encoding="utf-8").strip() or None

    def write_cookies(self, addr: TabAddress, cookies: List[Cookie]) -> None:
        cookie_file = self.browser_dir(addr) / "cookie.json"
        cookie_file.parent.mkdir(parents=True, exist_ok=True)
        cookie_file.write_text(jar.dump_json(cookies), encoding="utf-8")

    def write_url(self, addr: TabAddress, url: str) -> None:
        url_file = self.url_file(addr)
        url_file.parent.mkdir(parents=True, exist_ok=True)
        url_file.write_text(url, encoding="utf-8")
