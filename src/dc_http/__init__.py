"""
dc-http - runtime configuration for a small HTTP server.

Resolves port, concurrency mode, root directory and page paths from
defaults, a YAML file, DC_HTTP_* environment variables and long
command-line options.
"""

from dc_http._version import __version__, __version_info__

__author__ = "dc-http contributors"
__license__ = "MIT"

# Core components
from dc_http.core import (
    logger,
    ConfigResolver,
    ConfigValidator,
    DcHttpError,
    ConfigurationError,
    ConfigFileError,
    ConfigReleasedError,
    release,
    resolve,
    resolved_config,
    validate_or_die,
)

# Models
from dc_http.models import Config, ServerMode, new_default_config

__all__ = [
    # Version info
    "__version__",
    "__version_info__",
    "__author__",
    "__license__",
    # Core
    "logger",
    "ConfigResolver",
    "ConfigValidator",
    "release",
    "resolve",
    "resolved_config",
    "validate_or_die",
    # Exceptions
    "DcHttpError",
    "ConfigurationError",
    "ConfigFileError",
    "ConfigReleasedError",
    # Models
    "Config",
    "ServerMode",
    "new_default_config",
]
