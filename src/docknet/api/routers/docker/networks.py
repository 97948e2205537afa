import traceback
from typing import List

from docker.errors import APIError
from fastapi import APIRouter, Depends, Query
from fastapi.logger import logger
from fastapi.responses import JSONResponse

from docknet.api.dtos import (
    ErrorResponse,
    NetworkListResponse,
    NetworkResponse,
    SuccessResponse,
)
from docknet.docker.errors import (
    NetworkAlreadyExists,
    NoSuchNetwork,
    NoSuchNetworkOrContainer,
)
from docknet.docker.models import CreateNetworkOptions, NetworkConnectionOptions
from docknet.docker.networks import NetworkClient, get_client

router = APIRouter(tags=["Docker Networks"])


def _error(status_code: int, message: str):
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )


def _parse_filters(values: List[str]):
    filters = {}
    for value in values:
        key, sep, item = value.partition("=")
        if not sep or not key:
            raise ValueError(f"Filter '{value}' is not in key=value form")
        filters.setdefault(key, {})[item] = True
    return filters


@router.get("/networks", response_model=NetworkListResponse)
def list_networks(
    filter: List[str] = Query(default=[]),
    client: NetworkClient = Depends(get_client),
):
    """List networks, optionally filtered with repeated `filter=key=value`."""
    try:
        filters = _parse_filters(filter)
    except ValueError as e:
        return _error(400, str(e))

    try:
        if filters:
            networks = client.filtered_list_networks(filters)
        else:
            networks = client.list_networks()
        return NetworkListResponse(data=networks)
    except Exception as e:
        logger.error(f"Error listing networks: {e}\n{traceback.format_exc()}")
        return _error(500, str(e))


@router.get("/networks/{network_id}", response_model=NetworkResponse)
def get_network(network_id: str, client: NetworkClient = Depends(get_client)):
    try:
        return NetworkResponse(data=client.network_info(network_id))
    except NoSuchNetwork as e:
        return _error(404, str(e))
    except Exception as e:
        logger.error(f"Error getting network {network_id}: {e}\n{traceback.format_exc()}")
        return _error(500, str(e))


@router.post("/networks", response_model=NetworkResponse)
def create_network(
    opts: CreateNetworkOptions, client: NetworkClient = Depends(get_client)
):
    """
    Create a network.
    Only Name, Id and Driver are filled in the returned network.
    """
    try:
        return NetworkResponse(data=client.create_network(opts))
    except NetworkAlreadyExists as e:
        return _error(409, f"{e}: {opts.Name}")
    except APIError as e:
        logger.warning(f"Docker refused network {opts.Name}: {e.explanation}")
        return _error(e.status_code or 500, e.explanation or str(e))
    except Exception as e:
        logger.error(f"Error creating network {opts.Name}: {e}\n{traceback.format_exc()}")
        return _error(500, str(e))


@router.delete("/networks/{network_id}", response_model=SuccessResponse)
def remove_network(network_id: str, client: NetworkClient = Depends(get_client)):
    try:
        client.remove_network(network_id)
        return SuccessResponse(message=f"Network {network_id} removed.")
    except NoSuchNetwork as e:
        return _error(404, str(e))
    except APIError as e:
        # e.g. 403 while containers are still attached
        logger.warning(f"Docker refused to remove network {network_id}: {e.explanation}")
        return _error(e.status_code or 500, e.explanation or str(e))
    except Exception as e:
        logger.error(f"Error removing network {network_id}: {e}\n{traceback.format_exc()}")
        return _error(500, str(e))


@router.post("/networks/{network_id}/connect", response_model=SuccessResponse)
def connect_network(
    network_id: str,
    opts: NetworkConnectionOptions,
    client: NetworkClient = Depends(get_client),
):
    try:
        client.connect_network(network_id, opts)
        return SuccessResponse(
            message=f"Container {opts.Container} connected to network {network_id}."
        )
    except NoSuchNetworkOrContainer as e:
        return _error(404, str(e))
    except APIError as e:
        # e.g. 403 for a stopped container or an endpoint that already exists
        logger.warning(f"Docker refused to connect {opts.Container} to network {network_id}: {e.explanation}")
        return _error(e.status_code or 500, e.explanation or str(e))
    except Exception as e:
        logger.error(
            f"Error connecting {opts.Container} to network {network_id}: {e}\n{traceback.format_exc()}"
        )
        return _error(500, str(e))


@router.post("/networks/{network_id}/disconnect", response_model=SuccessResponse)
def disconnect_network(
    network_id: str,
    opts: NetworkConnectionOptions,
    client: NetworkClient = Depends(get_client),
):
    try:
        client.disconnect_network(network_id, opts)
        return SuccessResponse(
            message=f"Container {opts.Container} disconnected from network {network_id}."
        )
    except NoSuchNetworkOrContainer as e:
        return _error(404, str(e))
    except APIError as e:
        logger.warning(f"Docker refused to disconnect {opts.Container} from network {network_id}: {e.explanation}")
        return _error(e.status_code or 500, e.explanation or str(e))
    except Exception as e:
        logger.error(
            f"Error disconnecting {opts.Container} from network {network_id}: {e}\n{traceback.format_exc()}"
        )
        return _error(500, str(e))
