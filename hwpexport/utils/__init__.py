"""Plugin constants."""

from .constants import (
    ENGINE_DIR,
    ENGINE_EXECUTABLE,
    ENGINE_SCRIPT,
    FLAG_BATCH_FOLDER,
    FLAG_PICK_FOLDER,
    FLAG_SPACE_INDENT,
    HWP_EXTENSION,
    LEGACY_CORRUPTED_EXPORT_PATH,
    PLUGIN_ID,
    PLUGIN_NAME,
    SETTINGS_CONFIG,
    SOURCE_EXTENSION,
)

__all__ = [
    "PLUGIN_ID",
    "PLUGIN_NAME",
    "SOURCE_EXTENSION",
    "HWP_EXTENSION",
    "ENGINE_DIR",
    "ENGINE_SCRIPT",
    "ENGINE_EXECUTABLE",
    "FLAG_PICK_FOLDER",
    "FLAG_BATCH_FOLDER",
    "FLAG_SPACE_INDENT",
    "SETTINGS_CONFIG",
    "LEGACY_CORRUPTED_EXPORT_PATH",
]
