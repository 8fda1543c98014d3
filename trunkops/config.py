import copy
import json
import logging
import os

from rich.console import Console
from rich.logging import RichHandler

# Initialize Rich Consoles: results go to stdout, logs and traces to stderr
console = Console()
err_console = Console(stderr=True)

# Configure logging to use RichHandler
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=False)]
)

logger = logging.getLogger("trunkops")

CONFIG_FILENAME = ".trunkopsrc"


def get_default_config():
    """
    Returns the built-in configuration.

    Returns:
        dict: Default settings for git invocation and logging.
    """
    return {
        "git": {
            "binary": "git",
            "trunk": "main",
            "remote": "origin",
            "timeout": None,
        },
        "logging": {
            "level": "INFO",
        },
    }


def get_config_path():
    """
    Returns the path of the configuration file.

    TRUNKOPS_CONFIG takes precedence over ~/.trunkopsrc.
    """
    override = os.environ.get("TRUNKOPS_CONFIG")
    if override:
        return os.path.expanduser(override)
    return os.path.join(os.path.expanduser("~"), CONFIG_FILENAME)


def _merge(base, overrides):
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def _sanitize(config, config_path):
    """Replaces values of the wrong type with their defaults, warning for each."""
    defaults = get_default_config()
    for section, default in defaults.items():
        if not isinstance(config.get(section), dict):
            logger.warning(f"Ignoring '{section}' in {config_path}: expected a JSON object")
            config[section] = default

    git_config = config["git"]
    for key in ("binary", "trunk", "remote"):
        if not isinstance(git_config.get(key), str) or not git_config[key]:
            logger.warning(f"Ignoring git.{key} in {config_path}: expected a non-empty string")
            git_config[key] = defaults["git"][key]

    timeout = git_config.get("timeout")
    if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0):
        logger.warning(f"Ignoring git.timeout in {config_path}: expected a positive number of seconds")
        git_config["timeout"] = None

    if not isinstance(config["logging"].get("level"), str):
        logger.warning(f"Ignoring logging.level in {config_path}: expected a level name")
        config["logging"]["level"] = defaults["logging"]["level"]
    return config


def _apply_env_overrides(config):
    env_map = {
        "TRUNKOPS_GIT": "binary",
        "TRUNKOPS_TRUNK": "trunk",
        "TRUNKOPS_REMOTE": "remote",
    }
    for env_var, key in env_map.items():
        value = os.environ.get(env_var)
        if value:
            config["git"][key] = value
    return config


def load_config():
    """
    Loads the configuration, merging the user's file over the defaults.

    A missing file yields the defaults. An unreadable or malformed file is
    reported as a warning and ignored, as is any value of the wrong type.

    Returns:
        dict: The merged configuration.
    """
    config = get_default_config()
    config_path = get_config_path()

    if os.path.exists(config_path):
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                user_config = json.load(f)
            if isinstance(user_config, dict):
                _merge(config, user_config)
                _sanitize(config, config_path)
            else:
                logger.warning(f"Ignoring {config_path}: expected a JSON object")
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read config file {config_path}: {e}")

    return _apply_env_overrides(config)


def save_config(config):
    """Writes the configuration to the config file as JSON."""
    config_path = get_config_path()
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=2)
    return config_path


def generate_config_example():
    """Returns an example configuration with every supported key."""
    example = copy.deepcopy(get_default_config())
    example["git"]["timeout"] = 120
    return example


def set_log_level(level):
    """Sets the trunkops log level from a name like 'DEBUG' or a logging constant."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
