"""Cliente HTTP genérico sobre ``requests.Session``.

Uso:
    client = HttpClient()
    client.set_options(ClientOptions(username="user", password="secret"))
    response = client.send_request("GET", "https://example.org/api/apps/g/")
"""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import requests

from ..config import Config
from ..exceptions import TransportError
from .base import Headers, Sender

logger = logging.getLogger(__name__)


@dataclass
class ClientOptions:
    timeout: float = field(default_factory=lambda: Config.HTTP_TIMEOUT)
    username: Optional[str] = None
    password: Optional[str] = None
    # Valor completo de la cabecera Authorization, p. ej. "bearer 1234"
    token: Optional[str] = None
    verify: bool = field(default_factory=lambda: Config.HTTP_VERIFY_TLS)


def _flatten_headers(headers: Optional[Headers]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for key, value in (headers or {}).items():
        if isinstance(value, (list, tuple)):
            value = ", ".join(str(v) for v in value)
        out[key] = str(value)
    return out


class HttpClient(Sender):
    def __init__(self, options: Optional[ClientOptions] = None):
        self._session = requests.Session()
        self.options = options or ClientOptions()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def set_options(self, options: ClientOptions) -> None:
        """Replace the whole option set; credentials from earlier calls are dropped."""
        self.options = options

    def send_request(
        self,
        method: str,
        url: str,
        body=None,
        headers: Optional[Headers] = None,
        cookies: Optional[Dict[str, str]] = None,
        auth: Optional[Tuple[str, str]] = None,
        raise_for_status: bool = True,
    ) -> requests.Response:
        """Send one request.

        ``auth`` is HTTP Basic for this request only and takes precedence over
        the stored options. With ``raise_for_status=False`` non-2xx responses
        are returned unread instead of raising.
        """
        return self._request(
            method,
            url,
            data=body,
            headers=headers,
            cookies=cookies,
            auth=auth,
            raise_for_status=raise_for_status,
        )

    def upload_request(
        self,
        method: str,
        url: str,
        file_path: str,
        field_name: str,
        headers: Optional[Headers] = None,
        cookies: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        try:
            fh = open(file_path, "rb")
        except OSError as exc:
            raise TransportError(f"failed to open file {file_path}: {exc}") from exc
        with fh:
            files = {field_name: (os.path.basename(file_path), fh)}
            return self._request(method, url, files=files, headers=headers, cookies=cookies)

    def _request(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Headers],
        auth: Optional[Tuple[str, str]] = None,
        raise_for_status: bool = True,
        **kwargs: Any,
    ) -> requests.Response:
        request_headers = _flatten_headers(headers)
        if auth is None:
            if self.options.token:
                request_headers["Authorization"] = self.options.token
            elif self.options.username:
                auth = (self.options.username, self.options.password or "")

        started = time.time()
        try:
            response = self._session.request(
                method,
                url,
                headers=request_headers,
                auth=auth,
                timeout=self.options.timeout,
                verify=self.options.verify,
                stream=True,
                **kwargs,
            )
        except requests.RequestException as exc:
            raise TransportError(f"request to {url} failed: {exc}") from exc

        logger.debug(
            "%s %s -> %s (%d ms)",
            method,
            url,
            response.status_code,
            int((time.time() - started) * 1000),
        )
        if raise_for_status and not 200 <= response.status_code < 300:
            response.close()
            raise TransportError(
                f"request to {url} returned with response {response.status_code} {response.reason}",
                response=response,
            )
        return response
