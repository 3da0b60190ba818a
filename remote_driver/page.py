"""
Page handle for a remote session.

The Page is the root handle returned when a session is opened. It exposes
page-level commands (navigation, cookies, scripts, screenshots, alerts) and
the root element lookup that selections start from.
"""

import base64
import binascii
from pathlib import Path
from typing import Any, Union

from remote_driver.elements import Element, Selection, elements_from_result
from remote_driver.models import Cookie, Selector
from remote_driver.session import ProtocolError, Session


def _expect_str(result: Any, what: str) -> str:
    if not isinstance(result, str):
        raise ProtocolError(f"unexpected {what} result: {result!r}")
    return result


class Page:
    """Root handle over one remote session.

    Example:
        page = browser.page("firefox")
        page.navigate("https://example.com")
        page.set_cookie(Cookie(name="theme", value="dark"))
        print(page.title())
        page.find("a").click()
    """

    def __init__(self, session: Session) -> None:
        """Initialize Page.

        Args:
            session: The session this page drives.
        """
        self._session = session

    @property
    def session(self) -> Session:
        """Get the underlying session."""
        return self._session

    def destroy(self) -> None:
        """Delete the remote session."""
        self._session.delete()

    # Navigation

    def navigate(self, url: str) -> "Page":
        """Load a URL. Returns the page for chaining."""
        self._session.execute("POST", "url", {"url": url})
        return self

    def url(self) -> str:
        """Get the current URL."""
        return _expect_str(self._session.execute("GET", "url"), "URL")

    def title(self) -> str:
        return _expect_str(self._session.execute("GET", "title"), "title")

    def html(self) -> str:
        """Get the page source."""
        return _expect_str(self._session.execute("GET", "source"), "source")

    def forward(self) -> None:
        self._session.execute("POST", "forward")

    def back(self) -> None:
        self._session.execute("POST", "back")

    def refresh(self) -> None:
        self._session.execute("POST", "refresh")

    def size(self, width: int, height: int) -> None:
        """Resize the current window."""
        self._session.execute("POST", "window/current/size", {"width": width, "height": height})

    # Cookies

    def set_cookie(self, cookie: Cookie) -> "Page":
        self._session.execute("POST", "cookie", {"cookie": cookie.to_wire()})
        return self

    def get_cookies(self) -> list[Cookie]:
        result = self._session.execute("GET", "cookie")
        if not isinstance(result, list):
            raise ProtocolError(f"unexpected cookie result: {result!r}")
        return [Cookie.model_validate(item) for item in result]

    def delete_cookie(self, name: str) -> None:
        self._session.execute("DELETE", f"cookie/{name}")

    def clear_cookies(self) -> None:
        self._session.execute("DELETE", "cookie")

    # Scripts and screenshots

    def run_script(self, body: str, *arguments: Any) -> Any:
        """Execute synchronous JavaScript in the page and return its result."""
        return self._session.execute("POST", "execute", {"script": body, "args": list(arguments)})

    def screenshot(self) -> bytes:
        """Capture the viewport as PNG bytes."""
        encoded = _expect_str(self._session.execute("GET", "screenshot"), "screenshot")
        try:
            return base64.b64decode(encoded)
        except binascii.Error as e:
            raise ProtocolError(f"failed to decode screenshot: {e}") from e

    def save_screenshot(self, path: Union[str, Path]) -> Path:
        """Capture the viewport and write it to ``path``."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.screenshot())
        return path

    # Alerts

    def alert_text(self) -> str:
        return _expect_str(self._session.execute("GET", "alert_text"), "alert text")

    def accept_alert(self) -> None:
        self._session.execute("POST", "accept_alert")

    def dismiss_alert(self) -> None:
        self._session.execute("POST", "dismiss_alert")

    # Elements

    def get_elements(self, selector: Selector) -> list[Element]:
        """Find elements from the document root."""
        result = self._session.execute("POST", "elements", selector.to_wire())
        return elements_from_result(result, self._session)

    def find(self, css: str) -> Selection:
        return Selection(self, (Selector.css(css),))

    within = find

    def find_by_xpath(self, xpath: str) -> Selection:
        return Selection(self, (Selector.xpath(xpath),))

    def find_by_link(self, text: str) -> Selection:
        return Selection(self, (Selector.link(text),))

    def __repr__(self) -> str:
        return f"Page(session={self._session!r})"
