"""httpx-backed transport."""

import httpx

from bnetwow.config.settings import get_settings
from bnetwow.errors import TransportError
from bnetwow.request.builder import BuiltRequest
from bnetwow.transport.base import RawResponse, Transport


class HttpxTransport(Transport):
    """Sends requests through a lazily created httpx.Client."""

    def __init__(self, client: httpx.Client | None = None):
        self._client = client

    def _get_client(self) -> httpx.Client:
        if self._client is None or self._client.is_closed:
            settings = get_settings()
            self._client = httpx.Client(
                timeout=httpx.Timeout(settings.http_timeout, connect=settings.http_connect_timeout),
            )
        return self._client

    def send(self, request: BuiltRequest) -> RawResponse:
        client = self._get_client()
        # h11 rejects values with surrounding whitespace; servers strip it anyway (RFC 9110 5.5)
        headers = {name: value.strip() for name, value in request.headers.items()}
        try:
            response = client.request(request.method, request.url, headers=headers)
        except httpx.ConnectError as e:
            raise TransportError(f"Cannot reach service: {e}") from e
        except httpx.TimeoutException as e:
            raise TransportError(f"Service timed out: {e}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Transport error: {e}") from e
        return RawResponse(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            self._client.close()
        self._client = None
