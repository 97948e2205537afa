import json
import logging
from http import HTTPStatus
from typing import List
from urllib.parse import quote

from docker import errors
from pydantic import TypeAdapter

from docknet.docker.errors import (
    NetworkAlreadyExists,
    NoSuchNetwork,
    NoSuchNetworkOrContainer,
)
from docknet.docker.models import (
    CreateNetworkOptions,
    CreateNetworkResponse,
    Network,
    NetworkConnectionOptions,
    normalize_filters,
)
from docknet.docker.transport import DockerTransport

logger = logging.getLogger(__name__)

_network_list = TypeAdapter(List[Network])

_client = None


def _network_path(network_id, action=""):
    path = f"/networks/{quote(network_id, safe='')}"
    if action:
        path = f"{path}/{action}"
    return path


def encode_filters(filters) -> str:
    """JSON-encode network filters for the ``filters`` query parameter."""
    return json.dumps(normalize_filters(filters))


class NetworkClient:
    """Calls the network endpoints of the Docker Engine API.

    Every operation performs a single request through the transport. Status
    codes that carry a meaning for a given endpoint are translated into the
    errors of ``docknet.docker.errors``; any other failure propagates as
    raised by the transport.

    ``timeout`` is forwarded to the transport as is; ``None`` uses the API
    client's default.
    """

    def __init__(self, transport):
        self.transport = transport

    @classmethod
    def from_env(cls):
        return cls(DockerTransport.from_env())

    def list_networks(self, timeout=None) -> List[Network]:
        """List all networks."""
        data = self.transport.get("/networks", timeout=timeout)
        return _network_list.validate_python(data or [])

    def filtered_list_networks(self, filters, timeout=None) -> List[Network]:
        """List the networks matching ``filters``, e.g. ``{"driver": {"bridge": True}}``."""
        params = {"filters": encode_filters(filters)}
        data = self.transport.get("/networks", params=params, timeout=timeout)
        return _network_list.validate_python(data or [])

    def network_info(self, network_id, timeout=None) -> Network:
        """Inspect a network by ID or name."""
        try:
            data = self.transport.get(_network_path(network_id), timeout=timeout)
        except errors.APIError as e:
            match e.status_code:
                case HTTPStatus.NOT_FOUND:
                    raise NoSuchNetwork(network_id) from e
            raise
        return Network.model_validate(data)

    def create_network(self, opts: CreateNetworkOptions, timeout=None) -> Network:
        """Create a network.

        The daemon only replies with the new ID, so the returned network
        carries the requested name and driver plus that ID. IPAM, labels and
        options are not echoed back; call ``network_info`` for those.
        """
        try:
            data = self.transport.post(
                "/networks/create", body=opts.to_wire(), timeout=timeout
            )
        except errors.APIError as e:
            match e.status_code:
                case HTTPStatus.CONFLICT:
                    raise NetworkAlreadyExists(opts.Name) from e
            raise

        created = CreateNetworkResponse.model_validate(data or {})
        if created.Warning:
            logger.warning(f"Network '{opts.Name}' created with warning: {created.Warning}")
        logger.info(f"Network '{opts.Name}' created with ID {created.ID}")
        return Network(Name=opts.Name, ID=created.ID, Driver=opts.Driver)

    def remove_network(self, network_id, timeout=None) -> None:
        """Remove a network by ID or name."""
        try:
            self.transport.delete(_network_path(network_id), timeout=timeout)
        except errors.APIError as e:
            match e.status_code:
                case HTTPStatus.NOT_FOUND:
                    raise NoSuchNetwork(network_id) from e
            raise
        logger.info(f"Network '{network_id}' removed")

    def connect_network(
        self, network_id, opts: NetworkConnectionOptions, timeout=None
    ) -> None:
        """Attach a container to a network."""
        self._post_connection(network_id, "connect", opts, timeout)
        logger.info(f"Container '{opts.Container}' connected to network '{network_id}'")

    def disconnect_network(
        self, network_id, opts: NetworkConnectionOptions, timeout=None
    ) -> None:
        """Detach a container from a network."""
        self._post_connection(network_id, "disconnect", opts, timeout)
        logger.info(
            f"Container '{opts.Container}' disconnected from network '{network_id}'"
        )

    def _post_connection(self, network_id, action, opts, timeout):
        try:
            self.transport.post(
                _network_path(network_id, action), body=opts.to_wire(), timeout=timeout
            )
        except errors.APIError as e:
            match e.status_code:
                case HTTPStatus.NOT_FOUND:
                    raise NoSuchNetworkOrContainer(network_id, opts.Container) from e
            raise

    def network_exists(self, name, timeout=None) -> bool:
        """Check if a network with exactly this name exists."""
        # The daemon's name filter matches substrings
        networks = self.filtered_list_networks({"name": {name: True}}, timeout=timeout)
        return any(network.Name == name for network in networks)


def get_client() -> NetworkClient:
    """Return the process-wide client, built from the environment on first use."""
    global _client
    if _client is None:
        _client = NetworkClient.from_env()
    return _client
