class NetworkError(Exception):
    """Base class for the domain errors raised by network operations."""


class NoSuchNetwork(NetworkError):
    def __init__(self, network_id):
        self.network_id = network_id
        super().__init__(f"No such network: {network_id}")


class NoSuchNetworkOrContainer(NetworkError):
    def __init__(self, network_id, container_id):
        self.network_id = network_id
        self.container_id = container_id
        super().__init__(
            f"No such network ({network_id}) or container ({container_id})"
        )


class NetworkAlreadyExists(NetworkError):
    def __init__(self, name=""):
        self.name = name
        super().__init__("network already exists")
