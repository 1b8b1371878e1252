import logging

from .src.config import Config
from .src.exceptions import (
    BodyReadError,
    CallError,
    ClientError,
    ConfigurationError,
    ErrorCategory,
    MissingFieldError,
    ParseError,
    ServiceError,
    ServiceKeyError,
    TransportError,
    UnexpectedStatusError,
    UploadError,
)
from .src.services.ans import AnsClient, Event, Resource
from .src.services.client_credentials import AuthToken
from .src.services.protecode import Protecode
from .src.services.service_key import ServiceKey, read_service_key
from .src.services.xsuaa import XSUAA
from .src.transport.client import ClientOptions, HttpClient


def configure_logging(level=None):
    """Logging simple para scripts que usan los clientes."""
    if level is None:
        level = logging.DEBUG if getattr(Config, "DEBUG", False) else logging.INFO
    logging.basicConfig(level=level)
    # urllib3 repite cada petición en DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)


__all__ = [
    "AnsClient",
    "AuthToken",
    "BodyReadError",
    "CallError",
    "ClientError",
    "ClientOptions",
    "ConfigurationError",
    "Config",
    "ErrorCategory",
    "Event",
    "HttpClient",
    "MissingFieldError",
    "ParseError",
    "Protecode",
    "Resource",
    "ServiceError",
    "ServiceKey",
    "ServiceKeyError",
    "TransportError",
    "UnexpectedStatusError",
    "UploadError",
    "XSUAA",
    "configure_logging",
    "read_service_key",
]
