from __future__ import annotations

from typing import Dict, Optional, Type

import requests

from ..exceptions import CallError, TransportError
from ..transport.base import Headers, Sender


class ServiceClient:
    """Clase base para los clientes de servicios remotos.

    Envuelve los errores del transporte con una descripción fija de la
    operación fallida y no reintenta.
    """

    def __init__(self, client: Sender):
        self.client = client

    def _send(
        self,
        method: str,
        url: str,
        description: str,
        headers: Optional[Headers] = None,
        body=None,
    ) -> requests.Response:
        try:
            return self.client.send_request(method, url, body=body, headers=headers)
        except TransportError as exc:
            raise CallError(f"{description}: {url}") from exc

    def _upload(
        self,
        method: str,
        url: str,
        file_path: str,
        field_name: str,
        description: str,
        headers: Optional[Dict[str, str]] = None,
        error_cls: Type[CallError] = CallError,
    ) -> requests.Response:
        try:
            return self.client.upload_request(method, url, file_path, field_name, headers=headers)
        except TransportError as exc:
            raise error_cls(f"{description}: {url}") from exc
