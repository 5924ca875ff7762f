"""
Override stages applied on top of the defaults, in order:
file, environment, command line.
"""

from .file import FILE_KEYS, apply_file_config
from .env import ENV_VARS, apply_env_config
from .cmdline import (
    CMDLINE_OPTIONS,
    CONFIG_FILE_OPTION,
    OptionScanner,
    apply_cmdline_config,
    find_config_file_option,
)

__all__ = [
    "FILE_KEYS",
    "ENV_VARS",
    "CMDLINE_OPTIONS",
    "CONFIG_FILE_OPTION",
    "OptionScanner",
    "apply_file_config",
    "apply_env_config",
    "apply_cmdline_config",
    "find_config_file_option",
]
