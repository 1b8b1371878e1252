"""Productor de eventos para SAP Alert Notification Service (ANS).

El contenido del evento lo aporta siempre quien llama; aquí solo se
serializa y se envía con un token XSUAA.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..config import Config
from ..transport.client import HttpClient
from .base import ServiceClient
from .service_key import ServiceKey, read_service_key
from .xsuaa import XSUAA

logger = logging.getLogger(__name__)

RESOURCE_EVENTS_PATH = "/cf/producer/v1/resource-events"


@dataclass
class Resource:
    resource_name: str
    resource_type: str
    tags: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "resourceName": self.resource_name,
            "resourceType": self.resource_type,
            "tags": dict(self.tags),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Resource":
        return cls(
            resource_name=data.get("resourceName", ""),
            resource_type=data.get("resourceType", ""),
            tags=dict(data.get("tags") or {}),
        )


@dataclass
class Event:
    event_timestamp: int
    resource: Resource
    severity: str
    category: str
    subject: str
    body: str
    tags: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "eventTimestamp": self.event_timestamp,
            "resource": self.resource.to_dict(),
            "severity": self.severity,
            "category": self.category,
            "subject": self.subject,
            "body": self.body,
            "tags": dict(self.tags),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Event":
        return cls(
            event_timestamp=int(data.get("eventTimestamp") or 0),
            resource=Resource.from_dict(data.get("resource") or {}),
            severity=data.get("severity", ""),
            category=data.get("category", ""),
            subject=data.get("subject", ""),
            body=data.get("body", ""),
            tags=dict(data.get("tags") or {}),
        )


class AnsClient(ServiceClient):
    def __init__(
        self,
        service_key: ServiceKey,
        client: Optional[HttpClient] = None,
        producer_url: Optional[str] = None,
    ):
        self.service_key = service_key
        self.xsuaa = XSUAA(client)
        self.producer_url = (producer_url or Config.ANS_PRODUCER_URL).rstrip("/")
        super().__init__(self.xsuaa.client)

    def send(self, event: Event) -> int:
        """Post ``event`` and return the HTTP status code."""
        self.xsuaa.set_bearer_token(
            self.service_key.oauth_url,
            self.service_key.client_id,
            self.service_key.client_secret,
        )
        url = f"{self.producer_url}{RESOURCE_EVENTS_PATH}"
        response = self._send(
            "POST",
            url,
            "failed to send event",
            headers={"Content-Type": "application/json"},
            body=json.dumps(event.to_dict()).encode("utf-8"),
        )
        response.close()
        logger.info("ANS event sent, status code: %d", response.status_code)
        return response.status_code


def send(service_key_json: str, event: Event, client: Optional[HttpClient] = None) -> int:
    service_key = read_service_key(service_key_json)
    return AnsClient(service_key, client=client).send(event)
