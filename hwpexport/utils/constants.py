PLUGIN_ID = "org.pymd.hwp_export"
PLUGIN_NAME = "HWP Export"

SOURCE_EXTENSION = "md"
HWP_EXTENSION = ".hwp"

# Engine layout, relative to the plugin directory
ENGINE_DIR = "scripts"
ENGINE_SCRIPT = "converter.py"
ENGINE_EXECUTABLE = "python"

FLAG_PICK_FOLDER = "--pick-folder"
FLAG_BATCH_FOLDER = "--batch-folder"
FLAG_SPACE_INDENT = "--space-indent"

# Plugin-scoped settings key holding the JSON config record
SETTINGS_CONFIG = "config"

# Value written by an early release on some Windows profiles
LEGACY_CORRUPTED_EXPORT_PATH = "s\\82109\\DeskC:\\User\\desktop"
