"""
dc-http core module.

Exports the configuration resolution components.
"""

# Exceptions and errors
from dc_http.core.exceptions import (
    DcHttpError,
    ConfigurationError,
    ConfigFileError,
    ConfigReleasedError,
)

# Logging
from dc_http.core.logging import (
    AsyncLogger,
    PerformanceLogger,
    logger,  # Pre-configured global logger
    perf_logger,
)

# Validators
from dc_http.core.validators import (
    MAX_PORT,
    valid_port,
    valid_mode,
    valid_directory,
    parse_port,
)

# Config file
from dc_http.core.config_store import DEFAULT_CONFIG_PATH, ConfigFileStore

# Resolution
from dc_http.core.secure_config import (
    CONFIG_FILE_ENV,
    ConfigResolver,
    ConfigValidator,
    release,
    resolve,
    resolved_config,
    validate_or_die,
)

__all__ = [
    # Exceptions
    "DcHttpError",
    "ConfigurationError",
    "ConfigFileError",
    "ConfigReleasedError",
    # Logging
    "AsyncLogger",
    "PerformanceLogger",
    "logger",
    "perf_logger",
    # Validators
    "MAX_PORT",
    "valid_port",
    "valid_mode",
    "valid_directory",
    "parse_port",
    # Config file
    "DEFAULT_CONFIG_PATH",
    "ConfigFileStore",
    # Resolution
    "CONFIG_FILE_ENV",
    "ConfigResolver",
    "ConfigValidator",
    "release",
    "resolve",
    "resolved_config",
    "validate_or_die",
]
