import io
from http import HTTPStatus
from typing import Callable, Optional
from unittest.mock import MagicMock

import pytest
import requests
from pytest_mock import MockerFixture

from btp_clients.src.transport.client import ClientOptions, HttpClient


def build_response(status_code: int = 200, body: str = "", reason: Optional[str] = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason or HTTPStatus(status_code).phrase
    response.raw = io.BytesIO(body.encode("utf-8"))
    return response


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    return build_response


@pytest.fixture
def http_client() -> HttpClient:
    return HttpClient(ClientOptions(timeout=5, verify=True))


@pytest.fixture
def mocked_send(mocker: MockerFixture, http_client: HttpClient) -> MagicMock:
    """Replace the network call; Session.request still prepares the request."""
    return mocker.patch.object(http_client._session, "send", return_value=build_response())


def sent_request(mocked_send: MagicMock, index: int = -1) -> requests.PreparedRequest:
    return mocked_send.call_args_list[index].args[0]


class BrokenRaw:
    """Body stream whose connection drops on the first read."""

    def __init__(self) -> None:
        self.closed = False

    def read(self, *args, **kwargs) -> bytes:
        raise OSError("connection reset")

    def close(self) -> None:
        self.closed = True
