"""WoW community API client.

Pipeline per call: Validate fields -> Build URL -> Sign (when a secret is
configured) -> Send -> Check status -> Decode -> Log
"""

from collections.abc import Iterable, Mapping
from typing import Any

from bnetwow.clients.factory import client_from_settings, current_client
from bnetwow.clients.models import ClientConfig
from bnetwow.decoding import decode_json
from bnetwow.endpoints import get_endpoint
from bnetwow.errors import TransportError, WowApiError
from bnetwow.logging.request_log import (
    RequestTimer,
    generate_request_id,
    get_request_logger,
    mask_url,
    request_id_var,
)
from bnetwow.request.builder import build_request
from bnetwow.security.fields import join_fields, validate_character_fields, validate_guild_fields
from bnetwow.security.signer import RequestSigner
from bnetwow.transport.base import Transport
from bnetwow.transport.httpx_transport import HttpxTransport


class ApiClient:
    """Synchronous client bound to one immutable ClientConfig.

    Without an explicit config, the published current client is used, and
    failing that one is built from environment settings.

    Each call logs to ``bnetwow.requests``; call
    ``bnetwow.logging.request_log.setup_logging()`` to emit JSON lines.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: Transport | None = None,
        signer: RequestSigner | None = None,
    ):
        self.config = config or current_client() or client_from_settings()
        self._transport = transport or HttpxTransport()
        self._signer = signer or RequestSigner()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self) -> None:
        self._transport.close()

    def get(self, resource_path: str, params: Mapping[str, object] | None = None) -> bytes:
        """GET a resource and return the raw, unmodified response body."""
        logger = get_request_logger()
        rid = generate_request_id()
        token = request_id_var.set(rid)
        url = ""
        try:
            request = build_request(self.config, resource_path, params, signer=self._signer)
            url = mask_url(request.url)
            with RequestTimer() as timer:
                response = self._transport.send(request)

            logger.info(
                "Request completed",
                extra={"request_data": {
                    "method": request.method,
                    "url": url,
                    "status_code": response.status_code,
                    "authenticated": self.config.authenticated,
                    "latency_ms": timer.elapsed_ms,
                }},
            )
            if response.status_code >= 400:
                raise TransportError(
                    f"Service returned HTTP {response.status_code} for {resource_path}",
                    status_code=response.status_code,
                    body=response.content,
                )
            return response.content
        except WowApiError as e:
            logger.warning(
                "Request failed",
                extra={"request_data": {
                    "path": resource_path,
                    "url": url,
                    "error": type(e).__name__,
                    "detail": str(e),
                }},
            )
            raise
        finally:
            request_id_var.reset(token)

    def get_json(
        self,
        resource_path: str,
        params: Mapping[str, object] | None = None,
        collection_key: str | None = None,
    ) -> Any:
        return decode_json(self.get(resource_path, params), collection_key)

    def fetch(self, endpoint: str, query: Mapping[str, object] | None = None, **path_args) -> Any:
        """Fetch a catalogued resource by name, e.g. ``fetch("item", id=19019)``."""
        spec = get_endpoint(endpoint)
        return self.get_json(spec.format_path(**path_args), query, spec.collection_key)

    def get_character(self, realm: str, name: str, fields: Iterable[str] = ()) -> dict:
        fields = list(fields)
        validate_character_fields(fields)
        query = {"fields": join_fields(fields)} if fields else None
        return self.fetch("character", query, realm=realm, name=name)

    def get_guild(self, realm: str, name: str, fields: Iterable[str] = ()) -> dict:
        fields = list(fields)
        validate_guild_fields(fields)
        query = {"fields": join_fields(fields)} if fields else None
        return self.fetch("guild", query, realm=realm, name=name)
