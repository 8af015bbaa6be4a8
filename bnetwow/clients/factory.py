"""Process-wide current client.

The current config is an immutable snapshot swapped under a lock, so
readers on any thread always see one whole ClientConfig. The last write
wins.
"""

import threading

from bnetwow.clients.models import ClientConfig
from bnetwow.config.settings import Settings, get_settings

_lock = threading.Lock()
_current: ClientConfig | None = None


def current_client() -> ClientConfig | None:
    """Return the published config, or None if nothing was published yet."""
    with _lock:
        return _current


def set_current_client(config: ClientConfig) -> ClientConfig:
    global _current
    with _lock:
        _current = config
    return config


def reset_current_client() -> None:
    global _current
    with _lock:
        _current = None


def new_client(
    region: str,
    locale: str = "",
    secret_key: str = "",
    public_key: str = "",
) -> ClientConfig:
    """Resolve a region/locale pair and publish it as the current client.

    Raises InvalidRegion or InvalidLocale without touching the current client.
    """
    config = ClientConfig.from_region(
        region,
        locale,
        secret_key=secret_key,
        public_key=public_key,
        send_empty_apikey=get_settings().wow_send_empty_apikey,
    )
    return set_current_client(config)


def client_from_settings(settings: Settings | None = None) -> ClientConfig:
    """Build (but don't publish) a config from environment settings."""
    settings = settings or get_settings()
    return ClientConfig.from_region(
        settings.wow_region,
        settings.wow_locale,
        secret_key=settings.wow_secret_key,
        public_key=settings.wow_public_key,
        send_empty_apikey=settings.wow_send_empty_apikey,
    )
