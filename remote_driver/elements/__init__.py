"""
Elements module for remote-driver.

This module provides handles to remote DOM elements:
- Element: Stateless proxy over a driver-issued element ID and its session
- Selection: Lazily resolved selector chain with element commands
- SelectionError: Raised when a selection cannot be resolved or acted upon

Example usage:
    from remote_driver.models import Selector

    links = page.get_elements(Selector.css("a"))
    links[0].click()

    page.find("header").find("h1").text()
"""

from remote_driver.elements.element import (
    ELEMENT_KEY,
    W3C_ELEMENT_KEY,
    Element,
    elements_from_result,
)
from remote_driver.elements.selection import Selection, SelectionError

__all__ = [
    "Element",
    "Selection",
    "SelectionError",
    "elements_from_result",
    "ELEMENT_KEY",
    "W3C_ELEMENT_KEY",
]
