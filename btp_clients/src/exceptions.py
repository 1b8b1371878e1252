"""Errores de los clientes HTTP.

Every error raised by this package derives from ``ClientError`` and carries an
``ErrorCategory`` so callers can tell service outages from bad input.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

import requests


class ErrorCategory(Enum):
    UNDEFINED = "undefined"
    SERVICE = "service"
    CONFIGURATION = "configuration"


class ClientError(RuntimeError):
    """Base class for client errors."""

    category: ErrorCategory = ErrorCategory.UNDEFINED


class TransportError(ClientError):
    """The request could not be completed or returned a non-2xx status."""

    def __init__(self, message: str, response: Optional[requests.Response] = None):
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code if self.response is not None else None


class ServiceError(ClientError):
    """The remote service was not reachable or refused the request."""

    category = ErrorCategory.SERVICE


class BodyReadError(ClientError):
    """The HTTP response body could not be retrieved."""


class UnexpectedStatusError(ClientError):
    category = ErrorCategory.SERVICE

    def __init__(self, status_code: int, body: str):
        super().__init__(
            f"expected response code 200, got '{status_code}', response body: '{body}'"
        )
        self.status_code = status_code
        self.body = body


class ParseError(ClientError):
    def __init__(self, body: str):
        super().__init__(f"HTTP response body could not be parsed as JSON: {body}")
        self.body = body


class MissingFieldError(ClientError):
    def __init__(self, field: str, body: str):
        super().__init__(
            f"expected authToken field '{field}' in json response; response body: '{body}'"
        )
        self.field = field
        self.body = body


class CallError(ClientError):
    """A service call failed; the message names the operation and URL."""


class UploadError(CallError):
    pass


class ConfigurationError(ClientError):
    """A setting could not be interpreted."""

    category = ErrorCategory.CONFIGURATION


class ServiceKeyError(ConfigurationError):
    pass
