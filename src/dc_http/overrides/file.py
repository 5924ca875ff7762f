"""
Configuration file override stage.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from dc_http.core.config_store import DEFAULT_CONFIG_PATH, ConfigFileStore
from dc_http.core.exceptions import ConfigFileError
from dc_http.core.logging import logger
from dc_http.models.config import CONFIG_FIELDS, Config
from dc_http.overrides.base import (
    Check,
    accept_mode,
    accept_page,
    accept_port,
    accept_root_dir,
    apply_candidate,
)

# Canonical key first, then legacy nested aliases
FILE_KEYS: Dict[str, Tuple[str, ...]] = {
    "port": ("port",),
    "mode": ("mode",),
    "root_dir": ("root_dir", "directories.root"),
    "index_page": ("index_page", "pages.index"),
    "not_found_page": ("not_found_page", "pages.not_found"),
}

FILE_CHECKS: Dict[str, Check] = {
    "port": accept_port,
    "mode": accept_mode,
    "root_dir": accept_root_dir,
    "index_page": accept_page,
    "not_found_page": accept_page,
}


def _lookup_field(store: ConfigFileStore, field: str) -> Tuple[bool, Any]:
    canonical, *aliases = FILE_KEYS[field]
    found, value = store.lookup(canonical)
    if found:
        return True, value
    for alias in aliases:
        found, value = store.lookup(alias)
        if found:
            logger.warning(
                "Deprecated config key, use the flat name instead",
                key=alias,
                replacement=canonical,
                file=store.path,
            )
            return True, value
    return False, None


def apply_file_config(
    cfg: Config,
    path: Optional[Union[str, Path]] = None,
    store: Optional[ConfigFileStore] = None,
) -> None:
    """
    Override cfg with values from the configuration file.

    Never raises for file problems: a missing or malformed file is logged
    and cfg is left untouched. Port, mode and root_dir are applied only
    when valid; pages are applied whenever present as non-empty text.

    Args:
        cfg: Configuration to update in place
        path: File to read (defaults to DEFAULT_CONFIG_PATH)
        store: Already loaded store, skips reading path
    """
    if store is None:
        config_path = str(path) if path is not None else DEFAULT_CONFIG_PATH
        try:
            store = ConfigFileStore.load(config_path)
        except ConfigFileError as e:
            if isinstance(e.cause, FileNotFoundError):
                logger.warning("Configuration file not found, skipping", file=e.path)
            else:
                logger.error(
                    "Error reading configuration file", file=e.path, line=e.line, error=e.detail
                )
            return

    applied = []
    for field in CONFIG_FIELDS:
        found, value = _lookup_field(store, field)
        if not found:
            continue
        if apply_candidate(cfg, field, value, FILE_CHECKS[field], "file"):
            applied.append(field)

    logger.debug("File overrides applied", file=store.path, fields=applied)
