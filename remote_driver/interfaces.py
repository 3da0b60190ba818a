"""
Abstract base interfaces for remote-driver.

These are the seams between the command layers and their collaborators.
Sessions, elements and test doubles implement the same named contracts.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from remote_driver.models import Capabilities
    from remote_driver.session import Session


class Executor(ABC):
    """Anything that can issue a wire protocol command.

    ``execute`` is the single path through which element and page commands
    reach the remote driver.
    """

    @abstractmethod
    def execute(self, method: str, endpoint: str, body: Optional[Any] = None) -> Any:
        """Issue a command and return the decoded result value."""
        ...


class Service(ABC):
    """A WebDriver process that can be started, stopped and opened."""

    @abstractmethod
    def start(self) -> None:
        """Launch the process and wait until it accepts connections."""
        ...

    @abstractmethod
    def stop(self) -> None:
        """Stop the process."""
        ...

    @abstractmethod
    def create_session(self, capabilities: "Capabilities") -> "Session":
        """Open a new remote session with the given capabilities."""
        ...
