"""Registry access failures."""

from __future__ import annotations


class RegistryAccessError(Exception):
    """Raised when the schema registry cannot be read or written."""


class UnexpectedResponseError(RegistryAccessError):
    """Raised when the registry answers with a status outside the accepted set."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Unexpected response status: {status_code} - {body}")


class RegistryConnectionError(RegistryAccessError):
    """Raised when no response could be obtained from the registry."""
