"""
Exceptions raised by the ClimaCell client.

Transport failures are not wrapped: they surface as the
``requests.exceptions.RequestException`` raised by the session.
"""

from typing import Any, Optional


class ClimaCellError(Exception):
    """Base class for errors raised by this package."""


class RemoteError(ClimaCellError):
    """The API answered with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: Optional[str] = None,
        body: Optional[Any] = None,
    ):
        self.status_code = status_code
        self.message = message
        self.error_code = error_code
        self.body = body
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.error_code:
            return f"{self.status_code} {self.error_code}: {self.message}"
        return f"{self.status_code}: {self.message}"


class DecodeError(ClimaCellError, ValueError):
    """A response body could not be decoded into the expected shape."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        endpoint: Optional[str] = None,
    ):
        self.message = message
        self.field = field
        self.value = value
        self.endpoint = endpoint
        super().__init__(str(self))

    def __str__(self) -> str:
        parts = []
        if self.endpoint:
            parts.append(f"{self.endpoint}:")
        if self.field:
            parts.append(f"field {self.field!r}:")
        parts.append(self.message)
        return " ".join(parts)

    def with_endpoint(self, endpoint: str) -> "DecodeError":
        """Return a copy of this error tagged with the endpoint it came from."""
        return DecodeError(self.message, field=self.field, value=self.value, endpoint=endpoint)
