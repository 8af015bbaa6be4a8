"""Request builder: config + resource path + query -> URL and headers.

Query parameters are always serialised sorted by name, so the same input
produces byte-identical URLs.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from urllib.parse import urlencode, urlunsplit

from bnetwow.clients.models import ClientConfig
from bnetwow.config.settings import get_settings
from bnetwow.security.signer import RequestSigner, SignedRequest, authorization_header

NAMESPACE = "/wow/"


@dataclass(frozen=True)
class BuiltRequest:
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    signed: SignedRequest | None = None


def canonical_path(resource_path: str) -> str:
    return NAMESPACE + resource_path.lstrip("/")


def build_query(config: ClientConfig, params: Mapping[str, object] | None = None) -> str:
    """Serialise ``params`` plus the implicit ``locale`` and ``apikey`` parameters."""
    query = {k: str(v) for k, v in (params or {}).items() if v is not None}
    query["locale"] = config.locale
    if config.secret_key or config.send_empty_apikey:
        query["apikey"] = config.secret_key
    # Commas stay literal so field lists read "stats,pvp"
    return urlencode(sorted(query.items()), safe=",")


def build_url(
    config: ClientConfig,
    resource_path: str,
    params: Mapping[str, object] | None = None,
) -> str:
    scheme = "https" if config.authenticated else "http"
    return urlunsplit((scheme, config.host, canonical_path(resource_path), build_query(config, params), ""))


def build_request(
    config: ClientConfig,
    resource_path: str,
    params: Mapping[str, object] | None = None,
    signer: RequestSigner | None = None,
    method: str = "GET",
) -> BuiltRequest:
    """Build a request, signing it when the config carries a secret key.

    Raises SigningError if the signature cannot be computed.
    """
    headers = {
        "Accept": "application/json",
        "User-Agent": get_settings().user_agent,
    }
    url = build_url(config, resource_path, params)

    signed = None
    if config.authenticated:
        signer = signer or RequestSigner()
        signed = signer.sign(config, method, canonical_path(resource_path))
        headers["Date"] = signed.timestamp
        headers["Authorization"] = authorization_header(config, signed.signature)

    return BuiltRequest(method=method, url=url, headers=headers, signed=signed)
