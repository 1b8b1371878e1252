import os
from dotenv import load_dotenv

from .exceptions import ConfigurationError


def _float_env(name: str, default: str) -> float:
    value = os.getenv(name, default)
    try:
        return float(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number of seconds, got '{value}'") from exc


class Config:
    load_dotenv()

    DEBUG = os.getenv("DEBUG", "false").lower() == "true"

    # Transporte HTTP compartido por todos los clientes
    HTTP_TIMEOUT = _float_env("HTTP_TIMEOUT", "60")
    HTTP_VERIFY_TLS = os.getenv("HTTP_VERIFY_TLS", "true").lower() == "true"

    # Alert Notification Service (producer API)
    ANS_PRODUCER_URL = os.getenv(
        "ANS_PRODUCER_URL",
        "https://clm-sl-ans-live-ans-service-api.cfapps.eu10.hana.ondemand.com",
    )

    # Protecode (basic auth)
    PROTECODE_SERVER_URL = os.getenv("PROTECODE_SERVER_URL")
    PROTECODE_USERNAME = os.getenv("PROTECODE_USERNAME")
    PROTECODE_PASSWORD = os.getenv("PROTECODE_PASSWORD")
