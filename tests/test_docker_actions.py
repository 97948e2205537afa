import requests
from docker import errors

from docknet.docker.actions import apply_configuration
from docknet.docker.errors import NoSuchNetworkOrContainer
from docknet.docker.models import Network


class FakeNetworkClient:
    def __init__(self, existing=(), connect_error=None, create_error=None):
        self.existing = set(existing)
        self.connect_error = connect_error
        self.create_error = create_error
        self.created = []
        self.connected = []

    def network_exists(self, name):
        return name in self.existing

    def create_network(self, opts):
        if self.create_error is not None:
            raise self.create_error
        self.created.append(opts)
        return Network(Name=opts.Name, ID="0123456789abcdef", Driver=opts.Driver)

    def connect_network(self, network_id, opts):
        if self.connect_error is not None:
            raise self.connect_error
        self.connected.append((network_id, opts.Container))


def test_apply_creates_missing_networks_and_connects_containers():
    client = FakeNetworkClient(existing={"frontend"})
    config = {
        "networks": [
            {"Name": "frontend"},
            {
                "Name": "backend",
                "Driver": "bridge",
                "IPAM": {"Config": [{"Subnet": "10.20.0.0/24"}]},
                "Containers": ["db"],
            },
        ]
    }

    messages = apply_configuration(config, client)

    assert messages == [
        "Network 'frontend' already exists.",
        "Network 'backend' created (0123456789ab).",
        "Container 'db' connected to network 'backend'.",
    ]
    assert client.created[0].IPAM.Configs[0].Subnet == "10.20.0.0/24"
    assert client.connected == [("backend", "db")]


def test_apply_reports_errors_without_stopping():
    client = FakeNetworkClient(connect_error=NoSuchNetworkOrContainer("backend", "ghost"))
    config = {"networks": [{"Name": "backend", "Containers": ["ghost"]}, {"Driver": "bridge"}]}

    messages = apply_configuration(config, client)

    assert messages[0] == "Network 'backend' created (0123456789ab)."
    assert messages[1] == (
        "Error connecting container 'ghost' to network 'backend': "
        "No such network (backend) or container (ghost)"
    )
    assert messages[2].startswith("Invalid network definition")


def test_apply_reports_api_errors_on_create():
    response = requests.Response()
    response.status_code = 400
    client = FakeNetworkClient(
        create_error=errors.APIError("bad", response=response, explanation="invalid subnet")
    )

    messages = apply_configuration({"networks": [{"Name": "backend"}]}, client)

    assert len(messages) == 1
    assert messages[0].startswith("Error creating network 'backend':")


def test_apply_without_networks_is_a_noop():
    assert apply_configuration({}, FakeNetworkClient()) == []
