import copy
import toml
import os
from .cli_logger import logger

CONFIG_FILE = "callreceiver.toml"

DEFAULT_CONFIG = {
    "android": {
        "project_root": "android",
        "manifest_file": os.path.join("app", "src", "main", "AndroidManifest.xml"),
    },
    "entry_point": {
        "strict": False,
    },
}

def load_config(path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.info(f"Loading configuration from {config_path}")
    if os.path.exists(config_path):
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                return toml.load(f)
        except toml.TomlDecodeError as e:
            logger.error(f"Error decoding TOML file at {config_path}: {e}")
            logger.info("Please check the file's format for syntax errors.")
        except IOError as e:
            logger.error(f"Error reading configuration file at {config_path}: {e}")
            logger.info("Please check file permissions.")
    return {}

def save_config(config, path="."):
    config_path = os.path.join(path, CONFIG_FILE)
    logger.info(f"Saving configuration to {config_path}")
    try:
        with open(config_path, "w", encoding="utf-8") as f:
            toml.dump(config, f)
        return True
    except IOError as e:
        logger.error(f"Error saving configuration to {config_path}: {e}")
        logger.info("Please check file permissions and ensure the directory is writable.")
        return False

def get_settings(config):
    """Return the loaded configuration merged over DEFAULT_CONFIG."""
    settings = copy.deepcopy(DEFAULT_CONFIG)
    for section, values in (config or {}).items():
        if isinstance(values, dict) and isinstance(settings.get(section), dict):
            settings[section].update(values)
        else:
            settings[section] = values
    return settings
