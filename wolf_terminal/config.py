# wolf_terminal/config.py
# Description: Configuration management for the wolf_terminal application.
#
# Imports
import copy
import os
import sys
if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib
from pathlib import Path
from typing import Any, Dict, Optional
#
# Third-Party Imports
from loguru import logger
from pydantic import BaseModel, Field, PositiveInt, ValidationError
#
#######################################################################################################################
#
# Functions:

# --- Path to the user's configuration file ---
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "wolf_terminal" / "config.toml"
CONFIG_PATH_ENV_VAR = "WOLF_TERMINAL_CONFIG"

CONFIG_TOML_CONTENT = """
# Configuration for wolf_terminal
# Copy to ~/.config/wolf_terminal/config.toml and edit to override.

[logging]
# Leave empty to disable file logging
log_file = ""
log_level = "INFO"

[typewriter]
# Characters revealed per tick
step = 1
# Milliseconds between ticks
speed_ms = 5
cursor = "█"
cursor_style = "bold green"
# Seconds between cursor blinks, 0 disables blinking
blink_interval = 0.5

[terminal]
user = "guest"
host = "wolf-os"
prompt = "$ "
welcome_banner = "Welcome to Wolf OS. Type 'help' to list available commands."
"""

DEFAULT_CONFIG_FROM_TOML: Dict[str, Any] = tomllib.loads(CONFIG_TOML_CONTENT)

_CONFIG_CACHE: Optional[Dict[str, Any]] = None


class TypewriterSettings(BaseModel):
    """Reveal speed and cursor appearance for typewriter widgets."""
    step: PositiveInt = 1
    speed_ms: PositiveInt = 5
    cursor: str = Field(default="█", min_length=1)
    cursor_style: str = "bold green"
    blink_interval: float = Field(default=0.5, ge=0)


class TerminalSettings(BaseModel):
    """Prompt and banner for the terminal app."""
    user: str = "guest"
    host: str = "wolf-os"
    prompt: str = "$ "
    welcome_banner: str = ""


def deep_merge_dicts(base: Dict, update: Dict) -> Dict:
    """Recursively merges update_dict into base_dict."""
    merged = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = deep_merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def get_config_path() -> Path:
    """Path of the user config file, honouring the environment override."""
    override = os.environ.get(CONFIG_PATH_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


def load_cli_config(force_reload: bool = False, config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Loads settings from the user's TOML config file merged over the built-in defaults.

    A missing file is not an error; the defaults are used. A file that cannot be
    parsed is logged and ignored.

    Args:
        force_reload: If True, bypasses the cache and reloads from disk.
        config_path: Explicit file to load instead of the default location.

    Returns:
        Dictionary containing all configuration settings.
    """
    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None and not force_reload and config_path is None:
        return _CONFIG_CACHE

    loaded_config = copy.deepcopy(DEFAULT_CONFIG_FROM_TOML)
    path = Path(config_path) if config_path is not None else get_config_path()

    if not path.exists():
        logger.debug(f"Config file not found at {path}. Using built-in defaults.")
    else:
        logger.info(f"Attempting to load config from: {path}")
        try:
            with open(path, "rb") as f:
                user_config_from_file = tomllib.load(f)
            loaded_config = deep_merge_dicts(loaded_config, user_config_from_file)
            logger.info(f"Successfully loaded and merged config from {path}")
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Error decoding TOML config file {path}: {e}. Using built-in defaults.")
        except OSError as e:
            logger.error(f"Could not read config file {path}: {e}. Using built-in defaults.")

    _CONFIG_CACHE = loaded_config
    return loaded_config


def get_cli_setting(section: str, key: str, default: Any = None) -> Any:
    """Helper to get a specific setting from the loaded configuration."""
    config = load_cli_config()
    section_data = config.get(section)
    if isinstance(section_data, dict):
        return section_data.get(key, default)
    return default


def _load_section(section: str, model: type) -> Any:
    section_data = load_cli_config().get(section, {})
    if not isinstance(section_data, dict):
        logger.warning(f"Config section [{section}] is not a table. Using defaults.")
        return model()
    try:
        return model.model_validate(section_data)
    except ValidationError as e:
        logger.warning(f"Invalid values in config section [{section}]: {e}. Using defaults.")
        return model()


def get_typewriter_settings() -> TypewriterSettings:
    """Validated ``[typewriter]`` settings."""
    return _load_section("typewriter", TypewriterSettings)


def get_terminal_settings() -> TerminalSettings:
    """Validated ``[terminal]`` settings."""
    return _load_section("terminal", TerminalSettings)

#
# End of config.py
#######################################################################################################################
