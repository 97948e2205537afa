import json
from unittest.mock import patch

import pytest
import requests
from docker import errors

from docknet.docker import transport as transport_module
from docknet.docker.networks import NetworkClient
from docknet.docker.transport import DockerTransport


class _TrackedResponse(requests.Response):
    def __init__(self, status_code, payload=None):
        super().__init__()
        self.status_code = status_code
        self._content = b"" if payload is None else json.dumps(payload).encode("utf-8")
        self._content_consumed = True
        self.url = "http+docker://localhost/v1.41/networks"
        self.closed = False

    def close(self):
        self.closed = True


class FakeAPIClient:
    base_url = "http+docker://localhost"
    api_version = "1.41"
    timeout = 60

    def __init__(self, response):
        self.response = response
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        return self.response


def test_request_sends_json_body_and_decodes_reply():
    api = FakeAPIClient(_TrackedResponse(201, {"Id": "abc123", "Warning": ""}))
    transport = DockerTransport(api)

    data = transport.post("/networks/create", body={"Name": "backend"}, timeout=5)

    assert data == {"Id": "abc123", "Warning": ""}
    method, url, kwargs = api.calls[0]
    assert method == "POST"
    assert url == "http+docker://localhost/v1.41/networks/create"
    assert json.loads(kwargs["data"]) == {"Name": "backend"}
    assert kwargs["headers"] == {"Content-Type": "application/json"}
    assert kwargs["timeout"] == 5
    assert api.response.closed is True


def test_request_uses_client_timeout_by_default():
    api = FakeAPIClient(_TrackedResponse(200, []))
    DockerTransport(api).get("/networks", params={"filters": "{}"})

    _, _, kwargs = api.calls[0]
    assert kwargs["timeout"] == 60
    assert kwargs["params"] == {"filters": "{}"}
    assert kwargs["data"] is None


def test_empty_body_returns_none():
    api = FakeAPIClient(_TrackedResponse(204))
    assert DockerTransport(api).delete("/networks/backend") is None
    assert api.response.closed is True


def test_not_found_raises_api_error_with_status_and_closes_response():
    api = FakeAPIClient(_TrackedResponse(404, {"message": "network backend not found"}))

    with pytest.raises(errors.NotFound) as excinfo:
        DockerTransport(api).get("/networks/backend")

    assert excinfo.value.status_code == 404
    assert excinfo.value.explanation == "network backend not found"
    assert api.response.closed is True


def test_conflict_raises_generic_api_error():
    api = FakeAPIClient(_TrackedResponse(409, {"message": "network with name backend already exists"}))

    with pytest.raises(errors.APIError) as excinfo:
        DockerTransport(api).post("/networks/create", body={"Name": "backend"})

    assert not isinstance(excinfo.value, errors.NotFound)
    assert excinfo.value.status_code == 409


def test_malformed_json_propagates():
    response = _TrackedResponse(200)
    response._content = b"{not json"
    api = FakeAPIClient(response)

    with pytest.raises(ValueError):
        DockerTransport(api).get("/networks")
    assert response.closed is True


def test_transport_errors_propagate_unchanged():
    class FailingAPIClient(FakeAPIClient):
        def request(self, method, url, **kwargs):
            raise requests.exceptions.ConnectionError("daemon unreachable")

    with pytest.raises(requests.exceptions.ConnectionError):
        DockerTransport(FailingAPIClient(None)).get("/networks")


def test_from_env_passes_configured_version_and_timeout(monkeypatch):
    monkeypatch.setattr(transport_module.config, "api_version", "1.41")
    monkeypatch.setattr(transport_module.config, "timeout", 5.0)
    monkeypatch.setattr(
        transport_module, "kwargs_from_env", lambda: {"base_url": "tcp://127.0.0.1:2375"}
    )

    with patch("docker.APIClient") as api_client:
        transport = DockerTransport.from_env()

    api_client.assert_called_once_with(
        version="1.41", timeout=5.0, base_url="tcp://127.0.0.1:2375"
    )
    assert transport.api is api_client.return_value


def test_network_client_from_env_wraps_transport(monkeypatch):
    monkeypatch.setattr(transport_module, "kwargs_from_env", lambda: {})

    with patch("docker.APIClient") as api_client:
        client = NetworkClient.from_env()

    assert isinstance(client.transport, DockerTransport)
    assert client.transport.api is api_client.return_value
