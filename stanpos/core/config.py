"""Functions for reading and merging stanpos configuration files."""
# ruff: noqa: PLW0603

from __future__ import annotations

import copy
from functools import reduce
from pathlib import Path
from typing import Any

import yaml
import yaml.scanner

try:
    from yaml import CSafeLoader as SafeLoader
except ImportError:
    from yaml import SafeLoader

from stanpos.core.misc import StanposError, get_logger
from stanpos.core.paths import paths

logger = get_logger(__name__)

DEFAULT_CONFIG = {
    "tagger": {
        "model": None,
        "jar": None,
        "java": None,
        "java_options": ["-mx300m"],
        "encoding": "utf8",
        "timeout": None,
    }
}

config = {}  # Full configuration


def read_yaml(yaml_file: str | Path) -> dict:
    """Read YAML file and handle errors.

    Args:
        yaml_file: Path to YAML file.

    Returns:
        Dictionary with parsed YAML data.

    Raises:
        StanposError: If the config can't be parsed or read.
    """
    try:
        with Path(yaml_file).open(encoding="utf-8") as f:
            data = yaml.load(f, Loader=SafeLoader)
    except yaml.parser.ParserError as e:
        raise StanposError("Could not parse the configuration file:\n" + str(e)) from e
    except yaml.scanner.ScannerError as e:
        raise StanposError("An error occurred while reading the configuration file:\n" + str(e)) from e
    except FileNotFoundError as e:
        raise StanposError(f"Could not find the config file '{yaml_file}'") from e
    except yaml.YAMLError as e:
        raise StanposError(f"Could not read the configuration file '{yaml_file}':\n" + str(e)) from e

    if data is not None and not isinstance(data, dict):
        raise StanposError(f"The config file '{yaml_file}' could not be parsed.")
    return data or {}


def load_config(config_file: str | Path | None = None, overrides: dict | None = None) -> dict:
    """Load default, user and command line config and merge into one config structure.

    Later sources replace earlier ones: built-in defaults, the user config file, `config_file`, and finally
    `overrides`. Values of None in `overrides` are ignored.

    Args:
        config_file: Path to an explicit config file, or None.
        overrides: Dictionary with values that take precedence over all config files.

    Returns:
        The merged config.
    """
    global config
    config = copy.deepcopy(DEFAULT_CONFIG)

    user_config = paths.read_user_config()
    user_config.pop("data_dir", None)
    _merge_dicts_replace(config, user_config)

    if config_file:
        logger.debug("Reading config file: %s", config_file)
        _merge_dicts_replace(config, read_yaml(config_file))

    if overrides:
        _merge_dicts_replace(config, _drop_none(overrides))

    for key in ("tagger.model", "tagger.jar"):
        if value := get(key):
            set_value(key, str(resolve_path(value)))
    return config


def resolve_path(path: str | Path) -> Path:
    """Resolve a relative path against the data dir, unless it exists relative to the working directory.

    Args:
        path: Path to resolve.

    Returns:
        The resolved path.
    """
    path = Path(path).expanduser()
    if path.is_absolute() or path.exists() or not paths.get_data_path():
        return path
    return paths.get_data_path(path)


def _drop_none(d: dict) -> dict:
    """Return a copy of 'd' without keys whose value is None, recursively."""
    return {k: _drop_none(v) if isinstance(v, dict) else v for k, v in d.items() if v is not None}


def _get(name: str, config_dict: dict | None = None) -> Any:
    """Try to get value from config, raising an exception if key doesn't exist.

    Args:
        name: Config key to look up.
        config_dict: Dictionary to look up key in. If None, the global config is used.

    Returns:
        The value of the config key. If the key is not found, a KeyError is raised.
    """
    config_dict = config_dict if config_dict is not None else config
    # Handle dot notation
    return reduce(lambda c, k: c[k], name.split("."), config_dict)


def set_value(name: str, value: Any, overwrite: bool = True, config_dict: dict | None = None) -> None:
    """Set value in config, possibly using dot notation.

    Args:
        name: Config key to set.
        value: Value to set.
        overwrite: If False, only set value if key doesn't exist.
        config_dict: Dictionary to set key in. If None, the global config is used.
    """
    keys = name.split(".")
    prev = config_dict if config_dict is not None else config
    for key in keys[:-1]:
        prev.setdefault(key, {})
        prev = prev[key]
    if overwrite:
        prev[keys[-1]] = value
    else:
        prev.setdefault(keys[-1], value)


def get(name: str, default: Any = None, config_dict: dict | None = None) -> Any:
    """Get value from config, or return the supplied 'default' if key doesn't exist.

    Args:
        name: Config key to look up.
        default: Value to return if key doesn't exist.
        config_dict: Dictionary to look up key in. If None, the global config is used.

    Returns:
        The value of the config key, or the default value if the key is not found.
    """
    try:
        return _get(name, config_dict)
    except (KeyError, TypeError):
        return default


def _merge_dicts_replace(d: dict, new_dict: dict) -> None:
    """Merge dict 'd' with dict 'new_dict', replacing existing values.

    The dictionary 'd' is modified in place.

    Args:
        d: Main dictionary to merge into.
        new_dict: Dictionary with new values to merge.
    """
    if isinstance(d, dict) and isinstance(new_dict, dict):
        for k, v in new_dict.items():
            if k in d:
                if isinstance(d[k], dict) and isinstance(v, dict):
                    _merge_dicts_replace(d[k], v)
                else:
                    d[k] = v
            else:
                d[k] = v
