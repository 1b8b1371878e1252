"""Base helper for OAuth client credentials token acquisition."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..exceptions import MissingFieldError, ParseError

DEFAULT_TOKEN_TYPE = "bearer"


@dataclass
class AuthToken:
    token_type: str
    access_token: str
    expires_in: int = 0

    @classmethod
    def from_response_body(cls, body_text: str) -> "AuthToken":
        try:
            data = json.loads(body_text)
        except ValueError as exc:
            raise ParseError(body_text) from exc
        if not isinstance(data, dict):
            raise ParseError(body_text)

        access_token = data.get("access_token") or ""
        if not access_token:
            raise MissingFieldError("access_token", body_text)
        try:
            expires_in = int(data.get("expires_in") or 0)
        except (TypeError, ValueError) as exc:
            raise ParseError(body_text) from exc
        return cls(
            token_type=data.get("token_type") or DEFAULT_TOKEN_TYPE,
            access_token=access_token,
            expires_in=expires_in,
        )

    def header_value(self) -> str:
        return f"{self.token_type} {self.access_token}"


class ClientCredentials(ABC):
    """Obtains a token once and keeps it on the instance; there is no refresh.

    ``expires_in`` is exposed so callers can decide when to ask again.
    """

    def __init__(self) -> None:
        self.auth_token: Optional[AuthToken] = None

    def get_bearer_token(self, token_url: str, client_id: str, client_secret: str) -> AuthToken:
        auth_token = self._fetch_token(token_url, client_id, client_secret)
        self.auth_token = auth_token
        return auth_token

    @abstractmethod
    def _fetch_token(self, token_url: str, client_id: str, client_secret: str) -> AuthToken:
        """Return the validated token from the authorization server."""
