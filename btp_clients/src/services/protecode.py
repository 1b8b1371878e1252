"""Cliente del API REST de Protecode (escaneo de binarios)."""

from __future__ import annotations

from dataclasses import replace
from typing import IO, Optional
from urllib.parse import quote, urlencode

from ..config import Config
from ..exceptions import UploadError
from ..transport.client import HttpClient
from .base import ServiceClient

ENDPOINT_APPS = "/api/apps/{}/"
ENDPOINT_PRODUCT = "/api/product/{}/"
ENDPOINT_PDF_REPORT = "/api/product/{}/pdf-report"
ENDPOINT_UPLOAD = "/api/upload/{}"
ENDPOINT_FETCH = "/api/fetch/"

UPLOAD_FIELD_NAME = "file"


def _bool_header(value: bool) -> str:
    return "true" if value else "false"


class Protecode(ServiceClient):
    def __init__(
        self,
        server_url: Optional[str] = None,
        client: Optional[HttpClient] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ):
        self.server_url = (server_url or Config.PROTECODE_SERVER_URL or "").rstrip("/")
        if not self.server_url:
            raise ValueError("Protecode requires a server URL (PROTECODE_SERVER_URL)")
        if client is None:
            client = HttpClient()
            username = username or Config.PROTECODE_USERNAME
            password = password or Config.PROTECODE_PASSWORD
        if username:
            client.set_options(replace(client.options, username=username, password=password, token=None))
        super().__init__(client)

    def create_url(self, path: str, param_name: str = "", param_value: str = "") -> str:
        url = f"{self.server_url}{path}"
        if param_name:
            url = f"{url}?{urlencode({param_name: param_value})}"
        return url

    def load_product(self, group: str) -> IO[bytes]:
        url = self.create_url(ENDPOINT_APPS.format(quote(str(group), safe="")))
        headers = {"acceptType": "application/json"}
        return self._send("GET", url, "failed to load product", headers=headers).raw

    def trigger_with_file_upload(
        self, group: str, file_path: str, file_name: str, delete_binary: bool
    ) -> IO[bytes]:
        """Upload a local binary and start a scan for it."""
        url = self.create_url(ENDPOINT_UPLOAD.format(quote(file_name, safe="")))
        headers = {
            "Group": group,
            "Delete-Binary": _bool_header(delete_binary),
        }
        response = self._upload(
            "PUT",
            url,
            file_path,
            UPLOAD_FIELD_NAME,
            "failed to trigger scan with file upload",
            headers=headers,
            error_cls=UploadError,
        )
        return response.raw

    def trigger_with_fetch_url(self, group: str, fetch_url: str, delete_binary: bool) -> IO[bytes]:
        """Let the server download the binary from ``fetch_url`` and scan it."""
        url = self.create_url(ENDPOINT_FETCH)
        headers = {
            "Content-Type": "application/json",
            "Group": group,
            "Delete-Binary": _bool_header(delete_binary),
            "Url": fetch_url,
        }
        return self._send("POST", url, "failed to trigger scan with fetch-url", headers=headers).raw

    def load_result(self, product_id: int) -> IO[bytes]:
        url = self.create_url(ENDPOINT_PRODUCT.format(product_id))
        headers = {"acceptType": "application/json"}
        return self._send("GET", url, "failed to load results", headers=headers).raw

    def load_result_as_pdf(self, product_id: int, report_file_name: str) -> IO[bytes]:
        url = self.create_url(ENDPOINT_PDF_REPORT.format(product_id))
        headers = {
            "Cache-Control": "no-cache, no-store, must-revalidate",
            "Pragma": "no-cache",
            "Outputfile": report_file_name,
        }
        return self._send("GET", url, "failed to load result as PDF", headers=headers).raw

    def delete_result(self, product_id: int) -> None:
        url = self.create_url(ENDPOINT_PRODUCT.format(product_id))
        response = self._send("DELETE", url, "failed to delete result", headers={})
        response.close()
