"""
Environment variable override stage.
"""

import os
from typing import Dict, Mapping, Optional

from dc_http.core.logging import logger
from dc_http.models.config import CONFIG_FIELDS, Config
from dc_http.overrides.base import TEXT_CHECKS, apply_candidate

ENV_VARS: Dict[str, str] = {
    "port": "DC_HTTP_PORT",
    "mode": "DC_HTTP_MODE",
    "root_dir": "DC_HTTP_ROOT_DIR",
    "index_page": "DC_HTTP_INDEX_PAGE",
    "not_found_page": "DC_HTTP_NOT_FOUND_PAGE",
}


def apply_env_config(cfg: Config, environ: Optional[Mapping[str, str]] = None) -> None:
    """
    Override cfg from DC_HTTP_* environment variables.

    Args:
        cfg: Configuration to update in place
        environ: Variables to read (defaults to os.environ)
    """
    if environ is None:
        environ = os.environ

    applied = []
    for field in CONFIG_FIELDS:
        raw = environ.get(ENV_VARS[field])
        if raw is None:
            continue
        if apply_candidate(cfg, field, raw, TEXT_CHECKS[field], "env"):
            applied.append(field)

    logger.debug("Environment overrides applied", fields=applied)
