"""
Configuration resolution: CLI flag > env var > config file > default.

Config file: ~/.textsign/config.json, or the path in TEXTSIGN_CONFIG.
    {"format": "ed25519", "key_dir": "keys"}
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "blake3"
DEFAULT_KEY_DIR = "fixtures"


def config_path() -> Path:
    env = os.environ.get("TEXTSIGN_CONFIG")
    if env:
        return Path(env)
    return Path.home() / ".textsign" / "config.json"


def load_config_file(path: Optional[Path] = None) -> dict:
    path = path or config_path()
    if not path.exists():
        return {}
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: top level must be an object", path)
        return {}
    return data


def resolve_config(cli_val: Optional[str], env_key: str, config_key: str, default: str) -> str:
    if cli_val is not None:
        return cli_val
    env = os.environ.get(env_key)
    if env:
        return env
    cfg = load_config_file().get(config_key)
    if cfg:
        return str(cfg)
    return default


def default_format(cli_val: Optional[str] = None) -> str:
    return resolve_config(cli_val, "TEXTSIGN_FORMAT", "format", DEFAULT_FORMAT)


def default_key_dir(cli_val: Optional[str] = None) -> str:
    return resolve_config(cli_val, "TEXTSIGN_KEY_DIR", "key_dir", DEFAULT_KEY_DIR)
