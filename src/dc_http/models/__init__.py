"""
dc-http models.
"""

from .base import DcHttpBaseModel
from .config import (
    CONFIG_FIELDS,
    DEFAULT_INDEX_PAGE,
    DEFAULT_NOT_FOUND_PAGE,
    DEFAULT_PORT,
    DEFAULT_ROOT_DIR,
    Config,
    ServerMode,
    SourceLabel,
    new_default_config,
)

__all__ = [
    "DcHttpBaseModel",
    "CONFIG_FIELDS",
    "DEFAULT_INDEX_PAGE",
    "DEFAULT_NOT_FOUND_PAGE",
    "DEFAULT_PORT",
    "DEFAULT_ROOT_DIR",
    "Config",
    "ServerMode",
    "SourceLabel",
    "new_default_config",
]
