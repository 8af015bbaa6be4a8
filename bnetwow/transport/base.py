"""Abstract base for HTTP transports."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from bnetwow.request.builder import BuiltRequest


@dataclass
class RawResponse:
    status_code: int
    content: bytes
    headers: dict[str, str] = field(default_factory=dict)


class Transport(ABC):
    """Executes built requests and returns the raw response bytes."""

    @abstractmethod
    def send(self, request: BuiltRequest) -> RawResponse:
        """Send ``request`` and return the unmodified response.

        Raises TransportError on network failure. HTTP error statuses are
        returned, not raised; the caller decides what they mean.
        """
        ...

    def close(self) -> None:
        """Cleanup resources. Override if the transport holds connections."""
        pass
