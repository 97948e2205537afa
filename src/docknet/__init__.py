from docknet.docker.errors import (
    NetworkAlreadyExists,
    NetworkError,
    NoSuchNetwork,
    NoSuchNetworkOrContainer,
)
from docknet.docker.models import (
    CreateNetworkOptions,
    Endpoint,
    EndpointConfig,
    EndpointIPAMConfig,
    IPAMConfig,
    IPAMOptions,
    Network,
    NetworkConnectionOptions,
    NetworkFilterOpts,
)
from docknet.docker.networks import NetworkClient
from docknet.docker.transport import DockerTransport

__all__ = [
    "CreateNetworkOptions",
    "DockerTransport",
    "Endpoint",
    "EndpointConfig",
    "EndpointIPAMConfig",
    "IPAMConfig",
    "IPAMOptions",
    "Network",
    "NetworkAlreadyExists",
    "NetworkClient",
    "NetworkConnectionOptions",
    "NetworkError",
    "NetworkFilterOpts",
    "NoSuchNetwork",
    "NoSuchNetworkOrContainer",
]
