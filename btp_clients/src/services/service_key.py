from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from ..exceptions import ServiceKeyError

logger = logging.getLogger(__name__)


@dataclass
class ServiceKey:
    url: str
    client_id: str
    client_secret: str
    oauth_url: str


def read_service_key(service_key_json: str) -> ServiceKey:
    """Parse the JSON service key of an ANS instance."""
    try:
        data = json.loads(service_key_json)
    except (TypeError, ValueError) as exc:
        raise ServiceKeyError("error unmarshalling ANS serviceKey") from exc
    if not isinstance(data, dict):
        raise ServiceKeyError("error unmarshalling ANS serviceKey: expected a JSON object")

    service_key = ServiceKey(
        url=data.get("url") or "",
        client_id=data.get("client_id") or "",
        client_secret=data.get("client_secret") or "",
        oauth_url=data.get("oauth_url") or "",
    )
    logger.info("ANS serviceKey read successfully")
    return service_key
