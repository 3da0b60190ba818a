"""
Core data models for remote-driver.

This module defines the value types exchanged with a WebDriver process:
session capabilities, element selectors and cookies.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class SelectorStrategy(str, Enum):
    """Element location strategies understood by the wire protocol."""

    CSS = "css selector"
    XPATH = "xpath"
    LINK_TEXT = "link text"
    PARTIAL_LINK_TEXT = "partial link text"
    NAME = "name"
    ID = "id"
    CLASS_NAME = "class name"
    TAG_NAME = "tag name"


_STRATEGY_LABELS = {
    SelectorStrategy.CSS.value: "CSS",
    SelectorStrategy.XPATH.value: "XPath",
    SelectorStrategy.LINK_TEXT.value: "Link",
    SelectorStrategy.PARTIAL_LINK_TEXT.value: "Partial Link",
    SelectorStrategy.NAME.value: "Name",
    SelectorStrategy.ID.value: "ID",
    SelectorStrategy.CLASS_NAME.value: "Class",
    SelectorStrategy.TAG_NAME.value: "Tag",
}


class Selector(BaseModel):
    """How to locate elements: a strategy plus a pattern.

    Example:
        Selector(using="css selector", value="#id")
    """

    model_config = ConfigDict(frozen=True)

    using: str = Field(..., description="Location strategy name")
    value: str = Field(..., description="Pattern for the strategy")

    @classmethod
    def css(cls, value: str) -> "Selector":
        return cls(using=SelectorStrategy.CSS.value, value=value)

    @classmethod
    def xpath(cls, value: str) -> "Selector":
        return cls(using=SelectorStrategy.XPATH.value, value=value)

    @classmethod
    def link(cls, value: str) -> "Selector":
        return cls(using=SelectorStrategy.LINK_TEXT.value, value=value)

    def to_wire(self) -> dict[str, str]:
        """Request body for element lookup commands."""
        return {"using": self.using, "value": self.value}

    def __str__(self) -> str:
        label = _STRATEGY_LABELS.get(self.using, self.using)
        return f"{label}: {self.value}"


class Capabilities(BaseModel):
    """Requested configuration for a new session.

    An empty browser name lets the driver pick its default browser.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    browser_name: str = Field("", alias="browserName", description="Browser to drive")

    def to_wire(self) -> dict[str, Any]:
        """Payload for the session creation endpoint."""
        return {"desiredCapabilities": self.model_dump(by_alias=True)}


class Cookie(BaseModel):
    """Browser cookie as exchanged with the driver."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    value: Any
    path: Optional[str] = None
    domain: Optional[str] = None
    secure: bool = False
    http_only: bool = Field(False, alias="httpOnly")
    expiry: Optional[float] = None

    def to_wire(self) -> dict[str, Any]:
        """Cookie object for the ``cookie`` command body."""
        return self.model_dump(by_alias=True, exclude_none=True)
