# config_manager.py
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent

config_json = PACKAGE_DIR / "config.json"
ui_strings = PACKAGE_DIR / "ui_strings.json"

# Files the calculator cannot start without, relative to PACKAGE_DIR
REQUIRED_FILES = (
    "UI.py",
    "Dispatcher.py",
    "MathEngine.py",
    "Tokens.py",
    "error.py",
    "config_manager.py",
    "config.json",
    "ui_strings.json",
)

# Used whenever config.json is missing, unreadable or lacks a key
DEFAULT_SETTINGS = {
    "darkmode": False,
    "shift_to_copy": True,
    "hold_repeat": True,
    "debug": False,
}


def _read_json(path):
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)

    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.warning("Could not read %s: %s", path.name, e)
        return None


def load_setting_value(key_value):
    settings_dict = dict(DEFAULT_SETTINGS)
    loaded = _read_json(config_json)
    if isinstance(loaded, dict):
        settings_dict.update(loaded)

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def load_setting_description(key_value):
    settings_dict = _read_json(ui_strings)
    if not isinstance(settings_dict, dict):
        return {}

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def save_setting(settings_dict):
    try:
        with open(config_json, 'w', encoding='utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except (OSError, TypeError) as e:
        logger.error("Settings could not be saved: %s", e)
        return {}


def missing_files():
    """Return the names from REQUIRED_FILES that are not present in the package."""
    return [name for name in REQUIRED_FILES if not (PACKAGE_DIR / name).exists()]
