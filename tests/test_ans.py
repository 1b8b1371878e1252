import json
from unittest.mock import MagicMock

import pytest

from btp_clients.src.exceptions import CallError, UnexpectedStatusError
from btp_clients.src.services import ans
from btp_clients.src.services.ans import AnsClient, Event, Resource
from btp_clients.src.services.service_key import ServiceKey
from btp_clients.src.transport.client import HttpClient

from conftest import build_response, sent_request

PRODUCER_URL = "https://ans.example.org"
TOKEN_BODY = '{"access_token": "1234", "expires_in": 9876, "token_type": "bearer"}'

SAMPLE_EVENT = {
    "eventTimestamp": 1535618178,
    "resource": {
        "resourceName": "web-shop",
        "resourceType": "app",
        "tags": {"env": "prod"},
    },
    "severity": "INFO",
    "category": "ALERT",
    "subject": "Overloaded external dependency of My Web Shop external dependency",
    "body": "External dependency showing recommendations does not respond on time.",
    "tags": {
        "ans:correlationId": "30118",
        "ans:status": "CREATE_OR_UPDATE",
        "customTag": "42",
    },
}


@pytest.fixture
def service_key() -> ServiceKey:
    return ServiceKey(
        url=PRODUCER_URL,
        client_id="myClientID",
        client_secret="secret",
        oauth_url="https://auth.example.org/oauth/token",
    )


@pytest.fixture
def event() -> Event:
    return Event.from_dict(SAMPLE_EVENT)


class TestEvent:
    def test_to_dict(self) -> None:
        event = Event(
            event_timestamp=1535618178,
            resource=Resource(resource_name="web-shop", resource_type="app", tags={"env": "prod"}),
            severity="INFO",
            category="ALERT",
            subject="subject",
            body="body",
        )

        assert event.to_dict() == {
            "eventTimestamp": 1535618178,
            "resource": {"resourceName": "web-shop", "resourceType": "app", "tags": {"env": "prod"}},
            "severity": "INFO",
            "category": "ALERT",
            "subject": "subject",
            "body": "body",
            "tags": {},
        }

    def test_from_dict_keeps_template(self, event: Event) -> None:
        assert event.resource.resource_name == "web-shop"
        assert event.to_dict() == SAMPLE_EVENT


class TestAnsClient:
    @pytest.fixture
    def ans_client(self, service_key: ServiceKey, http_client: HttpClient) -> AnsClient:
        return AnsClient(service_key, client=http_client, producer_url=PRODUCER_URL + "/")

    def test_send(self, ans_client: AnsClient, mocked_send: MagicMock, event: Event) -> None:
        mocked_send.side_effect = [build_response(200, TOKEN_BODY), build_response(202)]

        status_code = ans_client.send(event)

        assert status_code == 202
        assert mocked_send.call_count == 2
        token_request = sent_request(mocked_send, 0)
        assert token_request.url == (
            "https://auth.example.org/oauth/token?grant_type=client_credentials&response_type=token"
        )
        request = sent_request(mocked_send, 1)
        assert request.method == "POST"
        assert request.url == PRODUCER_URL + "/cf/producer/v1/resource-events"
        assert request.headers["Authorization"] == "bearer 1234"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.body) == SAMPLE_EVENT

    def test_send_token_failure(self, ans_client: AnsClient, mocked_send: MagicMock, event: Event) -> None:
        mocked_send.return_value = build_response(401, '{"error": "unauthorized"}')

        with pytest.raises(UnexpectedStatusError, match="got '401'"):
            ans_client.send(event)

        assert mocked_send.call_count == 1

    def test_send_failure(self, ans_client: AnsClient, mocked_send: MagicMock, event: Event) -> None:
        mocked_send.side_effect = [build_response(200, TOKEN_BODY), build_response(400, "bad event")]

        with pytest.raises(CallError, match="failed to send event: https://ans.example.org/cf/producer"):
            ans_client.send(event)

        assert mocked_send.call_count == 2

    def test_default_producer_url(self, service_key: ServiceKey) -> None:
        client = AnsClient(service_key)

        assert client.producer_url == ans.Config.ANS_PRODUCER_URL.rstrip("/")


def test_send_with_service_key_json(
    service_key: ServiceKey, http_client: HttpClient, mocked_send: MagicMock, event: Event, mocker
) -> None:
    mocker.patch.object(ans.Config, "ANS_PRODUCER_URL", PRODUCER_URL)
    mocked_send.side_effect = [build_response(200, TOKEN_BODY), build_response(200)]
    raw_key = json.dumps(
        {
            "url": service_key.url,
            "client_id": service_key.client_id,
            "client_secret": service_key.client_secret,
            "oauth_url": service_key.oauth_url,
        }
    )

    assert ans.send(raw_key, event, client=http_client) == 200
    assert sent_request(mocked_send).url == PRODUCER_URL + "/cf/producer/v1/resource-events"
