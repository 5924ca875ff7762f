"""
Field validators for the server configuration.

Pure predicates: none of them raise, whatever the candidate.
"""

import os
import re
from typing import Any, Optional

MAX_PORT = 65535

_INTEGER_RE = re.compile(r"[-+]?[0-9]+")


def valid_port(candidate: Any) -> bool:
    """True if candidate is an int in 0..MAX_PORT"""
    if isinstance(candidate, bool) or not isinstance(candidate, int):
        return False
    return 0 <= candidate <= MAX_PORT


def valid_mode(candidate: Any) -> bool:
    """True if the first letter, case-folded, names a server mode ('p' or 't')"""
    if not isinstance(candidate, str) or not candidate:
        return False
    return candidate[0].lower() in ("p", "t")


def valid_directory(path: Any) -> bool:
    """
    True if path names an existing directory.

    Missing entries, non-directories, unreadable paths and malformed
    candidates are all reported as False.
    """
    if not isinstance(path, (str, os.PathLike)):
        return False
    try:
        return os.path.isdir(path)
    except (OSError, ValueError):
        return False


def parse_port(raw: Optional[str]) -> Optional[int]:
    """
    Parse a port given as text.

    The whole string must be an integer (no whitespace, no trailing
    garbage) and the result must pass valid_port. Returns None otherwise.
    """
    if raw is None or not _INTEGER_RE.fullmatch(raw):
        return None
    port = int(raw)
    return port if valid_port(port) else None
