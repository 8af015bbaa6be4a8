"""Client configuration model."""

from dataclasses import dataclass

from bnetwow.clients.regions import get_region, get_region_by_host, resolve
from bnetwow.errors import InvalidLocale


@dataclass(frozen=True)
class ClientConfig:
    host: str
    locale: str
    secret_key: str = ""  # empty = unauthenticated mode
    public_key: str = ""  # required when secret_key is set
    region: str = ""  # canonical region code, informational
    send_empty_apikey: bool = True  # keep "apikey=" on anonymous requests

    def __post_init__(self):
        # host and locale must come from the same region
        entry = get_region_by_host(self.host)
        if self.locale not in entry.locales:
            raise InvalidLocale(entry.code, self.locale)
        if self.secret_key and not self.public_key:
            raise ValueError("public_key is required when secret_key is set")

    @property
    def authenticated(self) -> bool:
        return bool(self.secret_key)

    @classmethod
    def from_region(
        cls,
        region: str,
        locale: str = "",
        secret_key: str = "",
        public_key: str = "",
        send_empty_apikey: bool = True,
    ) -> "ClientConfig":
        """Build a config whose host and locale come from the same region."""
        host, resolved_locale = resolve(region, locale)
        return cls(
            host=host,
            locale=resolved_locale,
            secret_key=secret_key,
            public_key=public_key,
            region=get_region(region).code,
            send_empty_apikey=send_empty_apikey,
        )
