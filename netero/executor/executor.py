import logging
from pathlib import Path
from typing import Optional

from playwright.sync_api import Locator, Page

from netero.errors import AssertionMismatchError
from netero.executor.clock import VirtualClock
from netero.models.action import (
    Action,
    AssertAction,
    AssertAttributeAction,
    AssertTextAction,
    AssertTitleAction,
    AssertUrlAction,
    CheckboxInput,
    FileInput,
    FormInput,
    GotoAction,
    GotoUrlAction,
    RadioInput,
    SelectInput,
    SubmitAction,
    TextInput,
    TimeAdvanceAction,
)
from netero.models.value import ElementValue, PageValue, Value
from netero.resolver.resolver import PageResolver

logger = logging.getLogger(__name__)

DEFAULT_FORM = "//form"
SUBMIT_FALLBACK = "xpath=.//button[@type='submit' or @action='submit'] | .//input[@type='submit']"


def _xpath_literal(value: str) -> str:
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    parts = value.split("'")
    return "concat(" + ", \"'\", ".join(f"'{p}'" for p in parts) + ")"


class ActionExecutor:
    """Runs one action at a time against a borrowed page."""

    def __init__(self, page: Page, state_dir: Path, timeout: Optional[float] = None):
        self.page = page
        self.resolver = PageResolver(page, timeout=timeout)
        self.clock = VirtualClock(state_dir)

    def execute(self, action: Action) -> None:
        if isinstance(action, GotoUrlAction):
            self.page.goto(action.value)

        elif isinstance(action, GotoAction):
            self.resolver.element(action.xpath).click()

        elif isinstance(action, SubmitAction):
            self._submit(action)

        elif isinstance(action, TimeAdvanceAction):
            self.clock.advance(action.value)

        elif isinstance(action, AssertUrlAction):
            self._assert(PageValue(which="url"), action)

        elif isinstance(action, AssertTitleAction):
            self._assert(PageValue(which="title"), action)

        elif isinstance(action, AssertAttributeAction):
            self._assert(
                ElementValue(xpath=action.xpath, which="attribute", name=action.attribute),
                action,
            )

        elif isinstance(action, AssertTextAction):
            self._assert(ElementValue(xpath=action.xpath, which="text"), action)

        else:
            raise TypeError(f"Unhandled action: {action!r}")

    def _assert(self, spec: Value, action: AssertAction) -> None:
        actual = self.resolver.value(spec)
        if not action.pattern.search(actual):
            raise AssertionMismatchError(spec.describe(), actual, action.expected)
        logger.debug("%s %r matches %r", spec.describe(), actual, action.expected)

    def _submit(self, action: SubmitAction) -> None:
        form_xpath = action.form or DEFAULT_FORM
        form = self.resolver.element(form_xpath)

        for name, form_input in action.data.items():
            self._fill(form, form_xpath, name, form_input)

        if action.button is not None:
            button = self.resolver.element(action.button)
        else:
            button = self.resolver.element(SUBMIT_FALLBACK, scope=form, scope_name=form_xpath)
        button.click()

    def _fill(self, form: Locator, form_xpath: str, name: str, form_input: FormInput) -> None:
        field = f"@name={_xpath_literal(name)}"

        if isinstance(form_input, TextInput):
            self._field(form, form_xpath, f"xpath=.//*[{field}]").fill(form_input.value)
        elif isinstance(form_input, CheckboxInput):
            element = self._field(form, form_xpath, f"xpath=.//input[{field}]")
            if form_input.checked:
                element.check()
            else:
                element.uncheck()
        elif isinstance(form_input, RadioInput):
            selector = f"xpath=.//input[{field} and @value={_xpath_literal(form_input.value)}]"
            self._field(form, form_xpath, selector).check()
        elif isinstance(form_input, SelectInput):
            self._field(form, form_xpath, f"xpath=.//select[{field}]").select_option(form_input.value)
        elif isinstance(form_input, FileInput):
            self._field(form, form_xpath, f"xpath=.//input[{field}]").set_input_files(form_input.files)
        else:
            raise TypeError(f"Unhandled form input: {form_input!r}")

    def _field(self, form: Locator, form_xpath: str, selector: str) -> Locator:
        return self.resolver.element(selector, scope=form, scope_name=form_xpath)
