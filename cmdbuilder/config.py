# -*- coding: utf-8 -*-
"""
@author:XuMing(xuming624@qq.com)
@description:
"""
import os
import json
from dataclasses import dataclass, field
from typing import Optional, Tuple
from loguru import logger

from cmdbuilder.format_command import Separators
from cmdbuilder.version import __version__

ROOT_DIR = os.getenv("CMDBUILDER_HOME", os.path.expanduser("~/.cmdbuilder/"))
DEFAULT_CONFIG_PATH = os.path.join(ROOT_DIR, "config.json")


def timeout_from_env(default: float = 300.0) -> float:
    """Read CMDBUILDER_TIMEOUT, falling back to default when unset or not a number"""
    value = os.environ.get("CMDBUILDER_TIMEOUT")
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Invalid CMDBUILDER_TIMEOUT {value!r}, using {default} seconds")
        return default


# Constants
DEFAULT_TIMEOUT = timeout_from_env()
DEFAULT_ENCODING = "utf-8"
CLI_VERSION = __version__


@dataclass
class CommandConfig:
    """Configuration for building and executing commands"""
    separators: Tuple[str, str, str, str] = field(default_factory=Separators)
    timeout: float = DEFAULT_TIMEOUT
    encoding: str = DEFAULT_ENCODING
    cwd: Optional[str] = None
    debug: bool = False

    def __post_init__(self):
        # Accept lists from JSON files
        self.separators = Separators(*self.separators)


def load_config(config_path: Optional[str] = None) -> CommandConfig:
    """
    Load configuration from a config file or create default configuration

    Args:
        config_path: Path to the configuration file (JSON), ROOT_DIR/config.json
            is used when omitted and present

    Returns:
        CommandConfig instance with loaded or default configuration
    """
    config = CommandConfig()

    # Fall back to the config file in ROOT_DIR
    if config_path is None and os.path.exists(DEFAULT_CONFIG_PATH):
        config_path = DEFAULT_CONFIG_PATH

    # Load from config file if specified
    if config_path and os.path.exists(config_path):
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = json.load(f)

            # Update config with file data
            if "separators" in config_data:
                config.separators = Separators(*config_data["separators"])
            if "timeout" in config_data:
                config.timeout = float(config_data["timeout"])
            if "encoding" in config_data:
                config.encoding = config_data["encoding"]
            if "cwd" in config_data:
                config.cwd = config_data["cwd"]
            if "debug" in config_data:
                config.debug = bool(config_data["debug"])
        except (OSError, ValueError, TypeError) as e:
            logger.error(f"Error loading config file: {str(e)}")
    elif config_path:
        logger.warning(f"Config file not found: {config_path}")

    return config
