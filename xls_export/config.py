"""Configuration defaults and YAML loading."""

import os

import yaml

from .errors import ConfigError

DEFAULTS = {
    "sheet_delimiter": "\t",
    "sheet_extension": "txt",
    "export_sheets": True,
    "export_modules": True,
    "continue_on_error": False,
    "encoding": "utf-8",
    "log_level": "INFO",
}


STRING_KEYS = ("sheet_delimiter", "sheet_extension", "encoding")


def load_config(config_path=None):
    """Load configuration from a YAML file on top of ``DEFAULTS``.

    A missing *config_path* (``None`` or a file that does not exist)
    yields the defaults unchanged.
    """
    config = dict(DEFAULTS)
    if not config_path or not os.path.exists(config_path):
        return config

    try:
        with open(config_path, "r") as f:
            user_config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read config file '{config_path}': {exc}") from exc

    if not isinstance(user_config, dict):
        raise ConfigError(f"Config file '{config_path}' must contain a mapping")

    unknown = sorted(set(user_config) - set(DEFAULTS))
    if unknown:
        raise ConfigError(f"Unknown config keys in '{config_path}': {', '.join(unknown)}")

    config.update(user_config)

    for key in STRING_KEYS:
        if not isinstance(config[key], str):
            raise ConfigError(
                f"Config key '{key}' in '{config_path}' must be a string, "
                f"got {type(config[key]).__name__}")
    return config
