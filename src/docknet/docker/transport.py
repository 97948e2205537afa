import json
import logging

import docker
import requests
from docker import errors
from docker.utils import kwargs_from_env

from docknet.config import config

logger = logging.getLogger(__name__)


class DockerTransport:
    """Sends JSON requests to the Docker Engine API.

    Connection handling (unix socket, TCP, TLS) is delegated to the wrapped
    ``docker.APIClient``. Non-2xx replies are raised as ``docker.errors.APIError``
    (or one of its subclasses) without interpreting the status code.
    """

    def __init__(self, api):
        self.api = api

    @classmethod
    def from_env(cls):
        api = docker.APIClient(
            version=config.api_version,
            timeout=config.timeout,
            **kwargs_from_env(),
        )
        return cls(api)

    def url(self, path):
        return f"{self.api.base_url}/v{self.api.api_version}{path}"

    def request(self, method, path, params=None, body=None, timeout=None):
        headers = {}
        data = None
        if body is not None:
            data = json.dumps(body)
            headers["Content-Type"] = "application/json"
        if timeout is None:
            timeout = self.api.timeout

        logger.debug(f"{method} {path} params={params}")
        response = self.api.request(
            method,
            self.url(path),
            params=params,
            data=data,
            headers=headers,
            timeout=timeout,
        )
        with response:
            try:
                response.raise_for_status()
            except requests.exceptions.HTTPError as e:
                # Raises APIError, or NotFound for a 404
                errors.create_api_error_from_http_exception(e)
            if not response.content:
                return None
            return response.json()

    def get(self, path, params=None, timeout=None):
        return self.request("GET", path, params=params, timeout=timeout)

    def post(self, path, body=None, timeout=None):
        return self.request("POST", path, body=body, timeout=timeout)

    def delete(self, path, timeout=None):
        return self.request("DELETE", path, timeout=timeout)
