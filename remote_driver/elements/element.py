"""
Remote element handle.

An Element is a stateless proxy over a server-issued element ID and the
executor (normally a Session) that produced it. Every operation maps onto one
wire protocol command routed through that executor.
"""

from typing import Any

from remote_driver.interfaces import Executor
from remote_driver.models import Selector
from remote_driver.session.transport import ProtocolError

# Legacy JSON wire protocol and W3C element reference keys
ELEMENT_KEY = "ELEMENT"
W3C_ELEMENT_KEY = "element-6066-11e4-a52e-4f735466cecf"


def elements_from_result(result: Any, executor: Executor) -> list["Element"]:
    """Build Elements from a decoded array of element references.

    Order is preserved as returned by the driver.

    Raises:
        ProtocolError: If the result is not an array of element references.
    """
    if not isinstance(result, list):
        raise ProtocolError(f"expected a list of elements, got: {result!r}")

    elements = []
    for entry in result:
        element_id = None
        if isinstance(entry, dict):
            element_id = entry.get(ELEMENT_KEY) or entry.get(W3C_ELEMENT_KEY)
        if not isinstance(element_id, str):
            raise ProtocolError(f"invalid element reference: {entry!r}")
        elements.append(Element(element_id, executor))
    return elements


def _expect(result: Any, expected: type, what: str) -> Any:
    if not isinstance(result, expected):
        raise ProtocolError(f"unexpected {what} result: {result!r}")
    return result


class Element:
    """A remote DOM element scoped to one session.

    Two Element objects are distinct even when they carry the same ID. Use
    ``is_equal_to`` to ask the driver whether they refer to the same node.

    Example:
        for element in page.get_elements(Selector.css("a")):
            print(element.get_text(), element.get_attribute("href"))
    """

    def __init__(self, element_id: str, session: Executor) -> None:
        """Initialize Element.

        Args:
            element_id: Opaque ID issued by the driver.
            session: Executor that issued the lookup producing this element.
        """
        self._id = element_id
        self._session = session

    @property
    def id(self) -> str:
        return self._id

    @property
    def session(self) -> Executor:
        """Get the executor this element belongs to."""
        return self._session

    def get_id(self) -> str:
        """Return the stored element ID without contacting the driver."""
        return self._id

    def _execute(self, method: str, command: str, body: Any = None) -> Any:
        return self._session.execute(method, f"element/{self._id}/{command}", body)

    def get_elements(self, selector: Selector) -> list["Element"]:
        """Find descendants of this element."""
        result = self._execute("POST", "elements", selector.to_wire())
        return elements_from_result(result, self._session)

    def get_text(self) -> str:
        """Get the visible text of the element."""
        return _expect(self._execute("GET", "text"), str, "text")

    def get_attribute(self, name: str) -> str:
        """Get an attribute value. A missing attribute yields an empty string."""
        result = self._execute("GET", f"attribute/{name}")
        if result is None:
            return ""
        return _expect(result, str, "attribute")

    def get_css(self, property: str) -> str:
        """Get the computed value of a CSS property."""
        return _expect(self._execute("GET", f"css/{property}"), str, "CSS")

    def click(self) -> None:
        self._execute("POST", "click")

    def clear(self) -> None:
        self._execute("POST", "clear")

    def value(self, text: str) -> None:
        """Type text into the element, one keystroke per character."""
        self._execute("POST", "value", {"value": list(text)})

    def is_selected(self) -> bool:
        return _expect(self._execute("GET", "selected"), bool, "selected")

    def is_displayed(self) -> bool:
        return _expect(self._execute("GET", "displayed"), bool, "displayed")

    def is_enabled(self) -> bool:
        return _expect(self._execute("GET", "enabled"), bool, "enabled")

    def submit(self) -> None:
        self._execute("POST", "submit")

    def is_equal_to(self, other: "Element") -> bool:
        """Ask the driver whether both elements refer to the same node."""
        return _expect(self._execute("GET", f"equals/{other.get_id()}"), bool, "equals")

    def __repr__(self) -> str:
        return f"Element(id={self._id!r})"
