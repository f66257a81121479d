from .plugin_config import SettingsPluginConfigStore, platform_default_export_path

__all__ = ["SettingsPluginConfigStore", "platform_default_export_path"]
