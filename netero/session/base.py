from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from netero.models.cookie import Cookie


@dataclass(frozen=True)
class TabAddress:
    browser: str
    tab: str


class SessionStateProvider(ABC):
    @abstractmethod
    def active_address(self) -> TabAddress:
        """Returns the browser and tab the next run should act on."""
        pass

    @abstractmethod
    def read_cookies(self, addr: TabAddress) -> Optional[List[Cookie]]:
        """
        Returns the cookies saved for the browser behind ``addr``.
        None means nothing was saved yet, which is not an error.
        """
        pass

    @abstractmethod
    def read_url(self, addr: TabAddress) -> Optional[str]:
        """Returns the tab's last URL, or None when it never navigated."""
        pass

    @abstractmethod
    def write_cookies(self, addr: TabAddress, cookies: List[Cookie]) -> None:
        pass

    @abstractmethod
    def write_url(self, addr: TabAddress, url: str) -> None:
        pass
