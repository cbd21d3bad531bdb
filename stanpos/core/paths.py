"""Paths used by stanpos."""

from __future__ import annotations

import os
from pathlib import Path

import appdirs
import yaml

try:
    from yaml import CSafeLoader as SafeLoader
except ImportError:
    from yaml import SafeLoader


class StanposPaths:
    """Paths used by stanpos."""

    def __init__(self) -> None:
        """Initialize paths."""
        # User config file, with default tagger settings and the path to the data dir
        self.user_config_file = Path(appdirs.user_config_dir("stanpos"), "config.yaml")

        # Data dir containing models and jar files (to be read from config)
        self.data_dir = None
        # Environment variable to override data path from config
        self.data_dir_env = "STANPOS_DATADIR"

    def read_user_config(self) -> dict:
        """Read the user config file.

        Returns:
            dict: User config data, or an empty dict if the file is missing or unreadable.
        """
        data = {}
        if self.user_config_file.is_file():
            try:
                with self.user_config_file.open(encoding="utf-8") as f:
                    data = yaml.load(f, Loader=SafeLoader) or {}
            except (OSError, yaml.YAMLError):
                data = {}
        return data if isinstance(data, dict) else {}

    def get_data_path(self, subpath: str | Path = "") -> Path | None:
        """Get location of directory containing tagger models and jar files.

        Args:
            subpath: Optional subpath to append to data dir.

        Returns:
            Path to data dir or data dir subpath.
        """
        # Environment variable overrides config
        if not self.data_dir and (
            data_dir_str := os.environ.get(self.data_dir_env) or self.read_user_config().get("data_dir")
        ):
            self.data_dir = Path(data_dir_str).expanduser()

        if subpath:
            return self.data_dir / subpath if self.data_dir else Path(subpath)
        return self.data_dir


paths = StanposPaths()
