"""Configuration utilities for mdjira."""

import pathlib

import yaml

from . import defaults
from .exceptions import ConfigError

GENERAL_KEYS = ["verbose", "code_theme", "max_code_lines", "inline_code_color"]


def read_config(ret: dict, config_file: pathlib.Path) -> dict:
    """Read configuration from yaml file

    Values already set in ret (from command line flags) win over the file,
    the file wins over defaults.
    """

    def checks():
        for key, value in defaults.RENDER_OPTIONS.items():
            if ret.get(key) is None:
                ret[key] = value

        if "verbose" not in ret or ret["verbose"] is None:
            ret["verbose"] = False

        try:
            ret["max_code_lines"] = int(ret["max_code_lines"])
        except (TypeError, ValueError) as e:
            raise ConfigError(
                f"max_code_lines must be an integer, got {ret['max_code_lines']!r}",
                str(config_file),
            ) from e
        if ret["max_code_lines"] < 1:
            raise ConfigError("max_code_lines must be positive", str(config_file))

        if not str(ret["code_theme"]).strip():
            raise ConfigError("code_theme cannot be empty", str(config_file))

    if not config_file.exists():
        checks()
        return ret

    with config_file.open() as file:
        try:
            config = yaml.safe_load(file)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}", str(config_file)) from e

    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ConfigError("Configuration must be a mapping", str(config_file))

    general = config.get("general") or {}
    if not isinstance(general, dict):
        raise ConfigError("The general section must be a mapping", str(config_file))

    for key in GENERAL_KEYS:
        if ret.get(key) is None and general.get(key) is not None:
            ret[key] = general[key]

    checks()
    return ret


def render_options(config: dict) -> dict:
    """Pick the renderer options out of a full configuration."""
    return {key: config[key] for key in defaults.RENDER_OPTIONS if key in config}


def write_config(config, config_file: pathlib.Path):
    """Write configuration to yaml file"""
    config_file.parent.mkdir(parents=True, exist_ok=True)

    yaml_config = {"general": {}}
    for key in GENERAL_KEYS:
        if config.get(key) is not None:
            yaml_config["general"][key] = config[key]

    with config_file.open("w") as file:
        yaml.safe_dump(yaml_config, file)
