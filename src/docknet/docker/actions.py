from docker import errors
from pydantic import ValidationError

from docknet.docker.errors import NetworkError
from docknet.docker.models import CreateNetworkOptions, NetworkConnectionOptions


def apply_configuration(config, client):
    """Create the declared networks and attach their containers.

    ``config`` holds a ``networks`` list; each entry uses the Docker create
    keys (``Name``, ``Driver``, ``IPAM`` ...) plus an optional ``Containers``
    list of containers to connect. Returns one message per step.
    """
    messages = []
    for network_config in config.get("networks") or []:
        network_config = dict(network_config)
        containers = network_config.pop("Containers", None) or []
        try:
            opts = CreateNetworkOptions.model_validate(network_config)
        except ValidationError as e:
            messages.append(f"Invalid network definition {network_config}: {e}")
            continue

        try:
            if client.network_exists(opts.Name):
                messages.append(f"Network '{opts.Name}' already exists.")
            else:
                network = client.create_network(opts)
                messages.append(f"Network '{opts.Name}' created ({network.ID[:12]}).")
        except (NetworkError, errors.APIError) as e:
            messages.append(f"Error creating network '{opts.Name}': {e}")
            continue

        for container in containers:
            try:
                client.connect_network(
                    opts.Name, NetworkConnectionOptions(Container=container)
                )
                messages.append(
                    f"Container '{container}' connected to network '{opts.Name}'."
                )
            except (NetworkError, errors.APIError) as e:
                messages.append(
                    f"Error connecting container '{container}' to network '{opts.Name}': {e}"
                )

    return messages
