"""
Selector chains over a page.

A Selection records a chain of selectors and resolves it lazily each time a
command runs, so it always reflects the current state of the page.
"""

from typing import TYPE_CHECKING, Callable, Optional, TypeVar

from remote_driver.elements.element import Element
from remote_driver.models import Selector
from remote_driver.session.transport import ProtocolError, TransportError

if TYPE_CHECKING:
    from remote_driver.page import Page

T = TypeVar("T")

_DRIVER_ERRORS = (TransportError, ProtocolError)


class SelectionError(Exception):
    """A selection could not be resolved or a command on it failed."""

    pass


class Selection:
    """Lazily resolved chain of selectors.

    Each selector after the first is applied within every element matched by
    the previous one, and the results are flattened in driver order.

    Example:
        page.find("header").find("h1").text()
        page.find("form").find_by_link("Forgot password?").click()
    """

    def __init__(self, page: "Page", selectors: tuple[Selector, ...] = ()) -> None:
        self._page = page
        self._selectors = tuple(selectors)

    @property
    def selectors(self) -> tuple[Selector, ...]:
        return self._selectors

    def _append(self, selector: Selector) -> "Selection":
        return Selection(self._page, self._selectors + (selector,))

    def find(self, css: str) -> "Selection":
        """Narrow the selection with a CSS selector."""
        return self._append(Selector.css(css))

    within = find

    def find_by_xpath(self, xpath: str) -> "Selection":
        return self._append(Selector.xpath(xpath))

    def find_by_link(self, text: str) -> "Selection":
        return self._append(Selector.link(text))

    def __str__(self) -> str:
        return " | ".join(str(selector) for selector in self._selectors)

    def __repr__(self) -> str:
        return f"Selection({str(self)!r})"

    # -- resolution ---------------------------------------------------------

    def elements(self) -> list[Element]:
        """Resolve the chain into the currently matching elements.

        Raises:
            SelectionError: If the chain is empty or any lookup fails.
        """
        if not self._selectors:
            raise SelectionError("empty selection")

        first, *rest = self._selectors
        try:
            elements = self._page.get_elements(first)
            for selector in rest:
                children: list[Element] = []
                for element in elements:
                    children.extend(element.get_elements(selector))
                elements = children
        except _DRIVER_ERRORS as e:
            raise SelectionError(f"failed to select '{self}': {e}") from e

        return elements

    def count(self) -> int:
        return len(self.elements())

    def _single(self) -> Element:
        elements = self.elements()
        if not elements:
            raise SelectionError(f"failed to select '{self}': no elements found")
        if len(elements) > 1:
            raise SelectionError(
                f"failed to select '{self}': multiple elements ({len(elements)}) were selected"
            )
        return elements[0]

    def _read(self, what: str, read: Callable[[Element], T]) -> T:
        element = self._single()
        try:
            return read(element)
        except _DRIVER_ERRORS as e:
            raise SelectionError(f"failed to retrieve {what} for '{self}': {e}") from e

    def _each(self, action: str, apply: Callable[[Element], None]) -> None:
        elements = self.elements()
        if not elements:
            raise SelectionError(f"failed to select '{self}': no elements found")
        for element in elements:
            try:
                apply(element)
            except _DRIVER_ERRORS as e:
                raise SelectionError(f"failed to {action} '{self}': {e}") from e

    # -- single-element reads ---------------------------------------------

    def text(self) -> str:
        return self._read("text", lambda e: e.get_text())

    def attribute(self, name: str) -> str:
        return self._read(f"attribute '{name}'", lambda e: e.get_attribute(name))

    def css(self, property: str) -> str:
        return self._read(f"CSS property '{property}'", lambda e: e.get_css(property))

    def selected(self) -> bool:
        return self._read("selected state", lambda e: e.is_selected())

    def visible(self) -> bool:
        return self._read("visible state", lambda e: e.is_displayed())

    def enabled(self) -> bool:
        return self._read("enabled state", lambda e: e.is_enabled())

    def equals_element(self, other: "Selection") -> bool:
        """Whether both selections resolve to the same remote element."""
        other_element = other._single()
        return self._read("equality", lambda e: e.is_equal_to(other_element))

    # -- actions on every matched element ---------------------------------

    def click(self) -> None:
        self._each("click on", lambda e: e.click())

    def fill(self, text: str) -> None:
        """Replace the value of every matched field with ``text``."""

        def fill_element(element: Element) -> None:
            element.clear()
            element.value(text)

        self._each("enter text into", fill_element)

    def check(self) -> None:
        self._set_checked(True)

    def uncheck(self) -> None:
        self._set_checked(False)

    def _set_checked(self, checked: bool) -> None:
        def set_element(element: Element) -> None:
            if element.get_attribute("type") != "checkbox":
                raise SelectionError(f"'{self}' does not refer to a checkbox")
            if element.is_selected() != checked:
                element.click()

        self._each("check" if checked else "uncheck", set_element)

    def submit(self) -> None:
        self._each("submit", lambda e: e.submit())

    def select(self, option_text: str) -> None:
        """Select the ``option`` child whose visible text matches."""
        option_selector = Selector.xpath(".//option")

        def select_option(element: Element) -> None:
            match: Optional[Element] = None
            for option in element.get_elements(option_selector):
                if option.get_text() == option_text:
                    match = option
                    break
            if match is None:
                raise SelectionError(f"no options with text '{option_text}' found for '{self}'")
            match.click()

        self._each("select from", select_option)
