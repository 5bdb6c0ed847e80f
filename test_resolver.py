import pytest

from conftest import FakeElement
from netero.errors import ResolutionError, ValueAbsentError
from netero.models.value import ElementValue, PageValue
from netero.resolver.resolver import PageResolver


def test_page_values(page):
    page.url = "https://a.test/x"
    page._title = "Inbox"
    resolver = PageResolver(page)
    assert resolver.value(PageValue(which="url")) == "https://a.test/x"
    assert resolver.value(PageValue(which="title")) == "Inbox"


def test_first_match_in_document_order(page):
    page.add("//li", FakeElement(text="one"), FakeElement(text="two"))
    resolver = PageResolver(page)
    assert resolver.value(ElementValue(xpath="//li", which="text")) == "one"


def test_zero_matches_is_a_resolution_error(page):
    with pytest.raises(ResolutionError, match="//nav"):
        PageResolver(page).element("//nav")


def test_absent_attribute_is_not_an_empty_string(page):
    page.add("//input", FakeElement(attrs={"value": ""}))
    resolver = PageResolver(page)
    assert resolver.value(ElementValue(xpath="//input", which="attribute", name="value")) == ""
    with pytest.raises(ValueAbsentError, match='"placeholder"'):
        resolver.value(ElementValue(xpath="//input", which="attribute", name="placeholder"))


def test_null_text_is_absent(page):
    page.add("//div", FakeElement(text=None))
    with pytest.raises(ValueAbsentError, match="Text content not found"):
        PageResolver(page).value(ElementValue(xpath="//div", which="text"))


def test_attribute_value_needs_a_name():
    with pytest.raises(ValueError):
        ElementValue(xpath="//a", which="attribute")
