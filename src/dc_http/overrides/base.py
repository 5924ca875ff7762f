"""
Candidate checks shared by the override stages.

Each check returns the value to store, or None when the candidate
must be discarded.
"""

from typing import Any, Callable, Dict, Optional

from dc_http.core.logging import logger
from dc_http.core.validators import parse_port, valid_directory, valid_port
from dc_http.models.config import Config, ServerMode, SourceLabel

Check = Callable[[Any], Optional[Any]]


def accept_port(value: Any) -> Optional[int]:
    return value if valid_port(value) else None


def accept_port_text(value: Any) -> Optional[int]:
    return parse_port(value) if isinstance(value, str) else None


def accept_mode(value: Any) -> Optional[ServerMode]:
    return ServerMode.parse(value)


def accept_root_dir(value: Any) -> Optional[str]:
    if isinstance(value, str) and valid_directory(value):
        return value
    return None


def accept_page(value: Any) -> Optional[str]:
    # pages are not checked against the filesystem
    if isinstance(value, str) and value:
        return value
    return None


TEXT_CHECKS: Dict[str, Check] = {
    "port": accept_port_text,
    "mode": accept_mode,
    "root_dir": accept_root_dir,
    "index_page": accept_page,
    "not_found_page": accept_page,
}


def apply_candidate(
    cfg: Config, field: str, value: Any, check: Check, source: SourceLabel
) -> bool:
    """Override field with value if check accepts it. Returns whether it was applied."""
    candidate = check(value)
    if candidate is None:
        logger.debug("Rejected candidate", field=field, source=source, value=repr(value))
        return False
    cfg.override(field, candidate, source)
    return True
