"""Exceptions raised by the WoW community API client.

Every error is raised synchronously to the immediate caller. Nothing in
this package retries; retry policy belongs to the application.
"""


class WowApiError(Exception):
    """Base class for all client errors."""


class InvalidRegion(WowApiError):
    def __init__(self, region: str):
        self.region = region
        super().__init__(f"Region '{region}' is not valid")


class InvalidLocale(WowApiError):
    def __init__(self, region: str, locale: str):
        self.region = region
        self.locale = locale
        super().__init__(f"Locale '{locale}' is not valid for region '{region}'")


class InvalidFields(WowApiError):
    """One or more requested optional fields are not recognised.

    ``invalid`` holds every offending name, in request order.
    """

    def __init__(self, invalid: list[str]):
        self.invalid = list(invalid)
        super().__init__(f"The following fields are not valid: {self.invalid}")


class SigningError(WowApiError):
    """The request signature could not be computed."""


class TransportError(WowApiError):
    """Network failure or an error status returned by the service."""

    def __init__(self, message: str, status_code: int | None = None, body: bytes = b""):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class DecodeError(WowApiError):
    """Response bytes are not JSON of the expected shape."""


class UnknownEndpoint(WowApiError, KeyError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown endpoint: {name}")

    def __str__(self) -> str:
        return self.args[0]
