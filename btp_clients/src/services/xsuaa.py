"""Autenticación XSUAA (OAuth2 client credentials).

Uso:
    xsuaa = XSUAA()
    xsuaa.set_bearer_token(oauth_url, client_id, client_secret)
    xsuaa.client.send_request("GET", url)  # lleva Authorization: bearer <token>
"""

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import Optional
from urllib.parse import urlsplit

from ..exceptions import ServiceError, TransportError, UnexpectedStatusError
from ..transport.client import HttpClient
from ..utils import read_response_body
from .client_credentials import AuthToken, ClientCredentials

logger = logging.getLogger(__name__)

TOKEN_PATH_AND_QUERY = "oauth/token?grant_type=client_credentials&response_type=token"


def token_endpoint(oauth_base_url: str) -> str:
    """Keep only scheme and host of ``oauth_base_url``; path and query are replaced."""
    parts = urlsplit(oauth_base_url)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"invalid OAuth base URL: '{oauth_base_url}'")
    return f"{parts.scheme}://{parts.netloc}/{TOKEN_PATH_AND_QUERY}"


class XSUAA(ClientCredentials):
    def __init__(self, client: Optional[HttpClient] = None):
        super().__init__()
        self.client = client or HttpClient()
        # set_bearer_token reconfigura el transporte compartido
        self._lock = threading.RLock()

    def set_bearer_token(self, oauth_base_url: str, client_id: str, client_secret: str) -> None:
        with self._lock:
            auth_token = self.get_bearer_token(oauth_base_url, client_id, client_secret)
            self.client.set_options(
                replace(self.client.options, token=auth_token.header_value(), username=None, password=None)
            )

    def get_bearer_token(self, token_url: str, client_id: str, client_secret: str) -> AuthToken:
        with self._lock:
            return super().get_bearer_token(token_url, client_id, client_secret)

    def _fetch_token(self, token_url: str, client_id: str, client_secret: str) -> AuthToken:
        method = "GET"
        url = token_endpoint(token_url)

        # las credenciales del cliente solo viajan en esta petición
        try:
            response = self.client.send_request(
                method,
                url,
                headers={"Accept": "application/json"},
                auth=(client_id, client_secret),
                raise_for_status=False,
            )
        except TransportError as exc:
            raise ServiceError(f"HTTP {method} request failed: {exc}") from exc

        body_text = read_response_body(response).decode("utf-8", errors="replace")
        if response.status_code != 200:
            raise UnexpectedStatusError(response.status_code, body_text)

        auth_token = AuthToken.from_response_body(body_text)
        logger.info("Retrieved %s token (expires in %ds)", auth_token.token_type, auth_token.expires_in)
        return auth_token
