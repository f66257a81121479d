from .api import ENTRYPOINT_GROUP, PLUGIN_API_VERSION

__all__ = ["ENTRYPOINT_GROUP", "PLUGIN_API_VERSION"]
