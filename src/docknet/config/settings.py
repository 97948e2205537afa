import os

from docker.constants import DEFAULT_DOCKER_API_VERSION, DEFAULT_TIMEOUT_SECONDS

CONFIG_SEARCH_PATHS = [
    "config.yaml",
    os.path.expanduser("~/.config/docknet/config.yaml"),
    "/etc/docknet/config.yaml",
]


def _parse_timeout(value):
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        return float(DEFAULT_TIMEOUT_SECONDS)
    return timeout if timeout > 0 else float(DEFAULT_TIMEOUT_SECONDS)


class Config:
    # Docker host and TLS come from DOCKER_HOST / DOCKER_TLS_VERIFY / DOCKER_CERT_PATH
    api_version = os.getenv("DOCKNET_API_VERSION", DEFAULT_DOCKER_API_VERSION)
    timeout = _parse_timeout(os.getenv("DOCKNET_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS)))
    log_level = os.getenv("DOCKNET_LOG_LEVEL", "WARNING").upper()
    config_file = os.getenv("DOCKNET_CONFIG_FILE", "")

    def find_config_file(self):
        """Return the first existing configuration file, or None."""
        if self.config_file:
            return self.config_file if os.path.exists(self.config_file) else None
        for path in CONFIG_SEARCH_PATHS:
            if os.path.exists(path):
                return path
        return None


config = Config()
