from typing import Callable, Dict, List, Optional

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError


class FakeElement:
    def __init__(
        self,
        attrs: Optional[Dict[str, str]] = None,
        text: Optional[str] = None,
        children: Optional[Dict[str, List["FakeElement"]]] = None,
        on_click: Optional[Callable[[], None]] = None,
    ):
        self.attrs = attrs or {}
        self.text = text
        self.children = children or {}
        self.on_click = on_click
        self.clicks = 0
        self.value: Optional[str] = None
        self.checked: Optional[bool] = None
        self.selected: Optional[str] = None
        self.files: Optional[List[str]] = None


class FakeLocator:
    def __init__(self, selector: str, elements: List[FakeElement]):
        self.selector = selector
        self.elements = elements

    @property
    def first(self) -> "FakeLocator":
        return FakeLocator(self.selector, self.elements[:1])

    def count(self) -> int:
        return len(self.elements)

    def wait_for(self, state: str = "visible", timeout: Optional[float] = None) -> None:
        if not self.elements:
            raise PlaywrightTimeoutError(f"Timeout waiting for {self.selector}")

    def locator(self, selector: str) -> "FakeLocator":
        found = self._one().children.get(selector, []) if self.elements else []
        return FakeLocator(selector, found)

    def _one(self) -> FakeElement:
        if not self.elements:
            raise PlaywrightTimeoutError(f"Timeout waiting for {self.selector}")
        return self.elements[0]

    def click(self) -> None:
        element = self._one()
        element.clicks += 1
        if element.on_click:
            element.on_click()

    def fill(self, value: str) -> None:
        self._one().value = value

    def check(self) -> None:
        self._one().checked = True

    def uncheck(self) -> None:
        self._one().checked = False

    def select_option(self, value: str) -> None:
        self._one().selected = value

    def set_input_files(self, files: List[str]) -> None:
        self._one().files = list(files)

    def get_attribute(self, name: str) -> Optional[str]:
        return self._one().attrs.get(name)

    def text_content(self) -> Optional[str]:
        return self._one().text


class FakePage:
    """Page double keyed by exact selector strings."""

    def __init__(self, url: str = "about:blank", title: str = ""):
        self.url = url
        self._title = title
        self.elements: Dict[str, List[FakeElement]] = {}
        self.visited: List[str] = []

    def add(self, selector: str, *elements: FakeElement) -> FakeElement:
        self.elements.setdefault(selector, []).extend(elements)
        return elements[0]

    def locator(self, selector: str) -> FakeLocator:
        return FakeLocator(selector, self.elements.get(selector, []))

    def goto(self, url: str) -> None:
        self.visited.append(url)
        self.url = url

    def title(self) -> str:
        return self._title


@pytest.fixture
def page():
    return FakePage()


@pytest.fixture
def state_dir(tmp_path):
    (tmp_path / "now.txt").write_text("10")
    (tmp_path / "active-browser.txt").write_text("b1\n")
    (tmp_path / "active-tab.txt").write_text("t1\n")
    return tmp_path
