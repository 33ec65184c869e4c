"""
Configuration loader for lvmkit.

Keeps host-specific values (device directory, thin pool name) out of code.
"""

from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from lvmkit.cli.lib.exceptions import PathIdentificationError


DEFAULT_CONFIG_PATH = Path("/etc/lvmkit/lvmkit.conf")
DEFAULT_THINPOOL_NAME = "thinpool"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LvmkitConfig:
    dev_dir: str = "/dev"
    thinpool_name: str = DEFAULT_THINPOOL_NAME
    log_level: str = "WARNING"

    def vg_path(self, vg: str) -> Path:
        """
        Resolve a volume group name (or absolute path) to its device directory path.

        Raises:
            PathIdentificationError: If `vg` is empty or a relative path with several components
        """
        if os.path.isabs(vg):
            return Path(vg)
        if not vg or os.sep in vg:
            raise PathIdentificationError(f"Volume group must be a name or an absolute path: {vg!r}")
        return Path(self.dev_dir) / vg

    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def _config_path() -> Path:
    env = os.environ.get("LVMKIT_CONFIG_PATH")
    if env:
        return Path(env)
    return DEFAULT_CONFIG_PATH


def _read_ini(path: Path) -> configparser.ConfigParser:
    parser = configparser.ConfigParser()
    if path.exists():
        parser.read(path, encoding="utf-8")
    return parser


def load_config() -> LvmkitConfig:
    """
    Load config from `LVMKIT_CONFIG_PATH` or `/etc/lvmkit/lvmkit.conf`.

    Only the `[lvm]` section is read. Missing files are not an error; defaults are returned.
    """
    parser = _read_ini(_config_path())
    section = parser["lvm"] if parser.has_section("lvm") else {}

    def _get(key: str, default: str) -> str:
        value = str(section.get(key, default)).strip()
        return value or default

    log_level = _get("log_level", "WARNING").upper()
    if log_level not in _LOG_LEVELS:
        log_level = "WARNING"

    return LvmkitConfig(
        dev_dir=_get("dev_dir", "/dev"),
        thinpool_name=_get("thinpool_name", DEFAULT_THINPOOL_NAME),
        log_level=log_level,
    )
