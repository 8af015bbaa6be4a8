"""Request signing for authenticated API calls.

The signed message is the newline-joined sequence of HTTP verb, request
timestamp, canonical request path and a trailing empty line. The
signature is base64(HMAC-SHA1(secret, message)). The timestamp is an
RFC 1123 HTTP-date in UTC, also sent as the Date header so the server can
rebuild the same message.
"""

import base64
import hashlib
import hmac
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import format_datetime

from bnetwow.clients.models import ClientConfig
from bnetwow.errors import SigningError

AUTH_SCHEME = "BNET"


@dataclass(frozen=True)
class SignedRequest:
    verb: str
    path: str
    timestamp: str  # exact text that was signed
    signature: str


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` as an HTTP-date, e.g. ``Mon, 19 Oct 2026 12:00:00 GMT``."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return format_datetime(moment.astimezone(timezone.utc), usegmt=True)


def canonical_message(verb: str, timestamp: str, path: str) -> str:
    return "\n".join([verb, timestamp, path, ""])


def compute_signature(secret_key: str, message: str) -> str:
    try:
        mac = hmac.new(secret_key.encode("utf-8"), message.encode("utf-8"), hashlib.sha1)
        return base64.b64encode(mac.digest()).decode("ascii")
    except (TypeError, ValueError, AttributeError) as e:
        raise SigningError(f"Could not compute request signature: {e}") from e


def authorization_header(config: ClientConfig, signature: str) -> str:
    # The leading space is part of the header value the service expects
    return f" {AUTH_SCHEME} {config.public_key}:{signature}"


class RequestSigner:
    """Signs requests with the config's secret key.

    ``clock`` returns the current time; inject a fixed one for reproducible
    signatures.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None):
        self._clock = clock or _utc_now

    def sign(self, config: ClientConfig, verb: str, path: str) -> SignedRequest:
        if not config.secret_key:
            raise SigningError("Cannot sign a request without a secret key")

        timestamp = format_timestamp(self._clock())
        message = canonical_message(verb, timestamp, path)
        signature = compute_signature(config.secret_key, message)
        return SignedRequest(verb=verb, path=path, timestamp=timestamp, signature=signature)
