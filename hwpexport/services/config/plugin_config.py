from __future__ import annotations

import json
from dataclasses import dataclass, field, replace

from platformdirs import user_desktop_dir

from hwpexport.domain.interfaces import ILogSink, IPluginSettings, NullLog
from hwpexport.domain.models import PluginConfig
from hwpexport.utils.constants import LEGACY_CORRUPTED_EXPORT_PATH, PLUGIN_ID, SETTINGS_CONFIG

K_DEFAULT_EXPORT_PATH = "default_export_path"


def platform_default_export_path() -> str:
    """The user's desktop folder, e.g. C:\\Users\\me\\Desktop or ~/Desktop."""
    return user_desktop_dir()


@dataclass
class SettingsPluginConfigStore:
    """
    Persistent plugin configuration, kept as one JSON record in plugin settings.

    Behavior:
      - Missing, corrupt or mistyped records fall back to the platform default.
      - load() self-heals the known corrupted legacy path and writes the fix
        back; later loads find the healed value and write nothing.
      - update_default_export_path() is the only mutation and always persists.
    """

    settings: IPluginSettings
    plugin_id: str = PLUGIN_ID
    platform_default: str = field(default_factory=platform_default_export_path)
    log: ILogSink = field(default_factory=NullLog)

    # -----------------------------
    # Internal helpers
    # -----------------------------

    def _read_record(self) -> dict[str, object]:
        raw = self.settings.get_plugin_setting(self.plugin_id, SETTINGS_CONFIG, None)

        if not isinstance(raw, str) or not raw.strip():
            return {}

        try:
            data = json.loads(raw)
        except ValueError:
            self.log.log_warning("[HWP Export] Ignoring unreadable plugin config.")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, config: PluginConfig) -> None:
        record = {K_DEFAULT_EXPORT_PATH: config.default_export_path}
        self.settings.set_plugin_setting(self.plugin_id, SETTINGS_CONFIG, json.dumps(record))

    # -----------------------------
    # Public API
    # -----------------------------

    def load(self) -> PluginConfig:
        stored = self._read_record().get(K_DEFAULT_EXPORT_PATH)
        path = stored if isinstance(stored, str) else self.platform_default
        config = PluginConfig(default_export_path=path)

        if config.default_export_path == LEGACY_CORRUPTED_EXPORT_PATH:
            config = replace(config, default_export_path=self.platform_default)
            self.log.log_info("[HWP Export] Fixed corrupted default export path setting automatically.")
            self._write(config)

        return config

    def update_default_export_path(self, config: PluginConfig, value: str) -> PluginConfig:
        updated = replace(config, default_export_path=value)
        self._write(updated)
        return updated

    def effective_export_path(self, config: PluginConfig) -> str:
        """Path to prefill in the export dialog; blank settings mean the desktop."""
        return config.default_export_path.strip() or self.platform_default
