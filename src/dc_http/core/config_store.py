"""
Read-only key/value view over the YAML configuration file.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union, cast

import yaml

from dc_http.core.exceptions import ConfigFileError
from dc_http.core.logging import logger

DEFAULT_CONFIG_PATH = "../config.yaml"


class ConfigFileStore:
    """
    Lookups into a parsed configuration file.

    Keys may be dotted ("pages.index") to reach nested mappings.
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None, path: Optional[str] = None):
        self.data: Dict[str, Any] = data or {}
        self.path = path

    @classmethod
    def load(cls, path: Union[str, Path]) -> "ConfigFileStore":
        """
        Parse the file at path.

        Raises:
            ConfigFileError: file missing, unreadable, not valid YAML or
                not a mapping at the top level
        """
        path_str = str(path)
        try:
            with open(path_str, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigFileError(path_str, e.strerror or str(e), cause=e) from e
        except UnicodeDecodeError as e:
            raise ConfigFileError(path_str, f"not valid UTF-8: {e.reason}", cause=e) from e
        except yaml.YAMLError as e:
            line = None
            mark = getattr(e, "problem_mark", None)
            if mark is not None:
                line = mark.line + 1
            detail = getattr(e, "problem", None) or str(e)
            raise ConfigFileError(path_str, detail, line=line, cause=e) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigFileError(
                path_str, f"top level must be a mapping, got {type(data).__name__}"
            )

        logger.debug("Config file loaded", file=path_str, keys=list(data.keys()))
        return cls(cast(Dict[str, Any], data), path=path_str)

    def lookup(self, key: str) -> Tuple[bool, Any]:
        """Return (True, value) when key is present, (False, None) otherwise."""
        current: Any = self.data
        for part in key.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return False, None
        return True, current

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value with support for dotted paths."""
        found, value = self.lookup(key)
        return value if found else default
