import logging
from typing import Optional, Union

from playwright.sync_api import Locator, Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from netero.errors import ResolutionError, ValueAbsentError
from netero.models.value import PageValue, Value

logger = logging.getLogger(__name__)


class PageResolver:
    """Turns location expressions and value specs into live page data.

    A location that matches several elements resolves to the first one in
    document order.
    """

    def __init__(self, page: Page, timeout: Optional[float] = None):
        self.page = page
        self.timeout = timeout

    def element(self, xpath: str, scope: Optional[Locator] = None, scope_name: Optional[str] = None) -> Locator:
        root: Union[Page, Locator] = scope if scope is not None else self.page
        match = root.locator(xpath).first
        try:
            match.wait_for(state="attached", timeout=self.timeout)
        except PlaywrightTimeoutError:
            raise ResolutionError(xpath, scope_name) from None
        logger.debug("Resolved %s", xpath)
        return match

    def value(self, spec: Value) -> str:
        if isinstance(spec, PageValue):
            if spec.which == "url":
                return self.page.url
            return self.page.title()

        element = self.element(spec.xpath)
        if spec.which == "attribute":
            found = element.get_attribute(spec.name)
            if found is None:
                raise ValueAbsentError(f'Attribute "{spec.name}" not found for element at "{spec.xpath}"')
            return found

        found = element.text_content()
        if found is None:
            raise ValueAbsentError(f'Text content not found for element at "{spec.xpath}"')
        return found
