from docknet.config.settings import config

__all__ = ["config"]
