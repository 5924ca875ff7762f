"""
Configuration resolution for the dc-http server.
"""

import os
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Mapping, Optional, Sequence, Union

from dc_http.core.config_store import DEFAULT_CONFIG_PATH, ConfigFileStore
from dc_http.core.exceptions import ConfigurationError
from dc_http.core.logging import logger, perf_logger
from dc_http.core.validators import valid_directory
from dc_http.models.config import Config, new_default_config
from dc_http.overrides import (
    CMDLINE_OPTIONS,
    OptionScanner,
    apply_cmdline_config,
    apply_env_config,
    apply_file_config,
    find_config_file_option,
)

CONFIG_FILE_ENV = "DC_HTTP_CONFIG_FILE"


class ConfigValidator:
    """
    Final check on a resolved configuration.

    Port and mode never reach this point invalid, since every stage
    discards bad candidates. The root directory is checked here because
    the last value may be the untouched default.
    """

    def validate_config(self, cfg: Config) -> None:
        """
        Validate the resolved configuration.

        Raises:
            ConfigurationError: root_dir is not an existing directory
        """
        if not valid_directory(cfg.root_dir):
            logger.error(
                "Invalid root directory",
                include_trace=False,
                root_dir=cfg.root_dir,
                source=cfg.sources["root_dir"],
            )
            error = ConfigurationError(
                f"Root directory does not exist or is not a directory: {cfg.root_dir}",
                context={"root_dir": cfg.root_dir, "source": cfg.sources["root_dir"]},
            )
            error.add_suggestion(
                "Create the directory or set root_dir, DC_HTTP_ROOT_DIR or --root-dir"
            )
            raise error


def validate_or_die(cfg: Config, validator: Optional[ConfigValidator] = None) -> None:
    """Validate cfg, exiting with status 1 and a message on stderr if it fails."""
    validator = validator or ConfigValidator()
    try:
        validator.validate_config(cfg)
    except ConfigurationError as e:
        print(f"✗ {e.message}", file=sys.stderr)
        sys.exit(1)


class ConfigResolver:
    """
    Resolves the server configuration.

    Layers, lowest to highest priority:
    1. Built-in defaults
    2. Configuration file (YAML)
    3. DC_HTTP_* environment variables
    4. Command-line options

    Config file location: explicit config_path, then --config-file=<path>,
    then DC_HTTP_CONFIG_FILE, then ../config.yaml.
    """

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        environ: Optional[Mapping[str, str]] = None,
        store: Optional[ConfigFileStore] = None,
    ) -> None:
        self.config_path = config_path
        self.environ = environ
        self.store = store
        self.scanner = OptionScanner([], CMDLINE_OPTIONS)
        self.validator = ConfigValidator()

    def config_file_path(self, args: Sequence[str]) -> str:
        """Which configuration file a resolution with args reads."""
        if self.config_path is not None:
            return str(self.config_path)
        from_args = find_config_file_option(args)
        if from_args:
            return from_args
        environ = os.environ if self.environ is None else self.environ
        return environ.get(CONFIG_FILE_ENV) or DEFAULT_CONFIG_PATH

    def build(self, args: Sequence[str]) -> Config:
        """Run every layer without the final check."""
        cfg = new_default_config()
        apply_file_config(cfg, path=self.config_file_path(args), store=self.store)
        apply_env_config(cfg, self.environ)
        apply_cmdline_config(cfg, args, self.scanner)
        return cfg

    def resolve(self, args: Optional[Sequence[str]] = None) -> Config:
        """
        Resolve and validate the configuration.

        Exits the process when the resolved root directory is unusable.

        Args:
            args: Command-line arguments without the program name
                (defaults to sys.argv[1:])
        """
        if args is None:
            args = sys.argv[1:]

        with perf_logger.measure("resolve_config"):
            cfg = self.build(args)
        validate_or_die(cfg, self.validator)

        logger.info("Configuration resolved", **cfg.as_dict())
        return cfg


def resolve(
    args: Optional[Sequence[str]] = None,
    *,
    config_path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Config:
    """Resolve the configuration with a one-off resolver."""
    return ConfigResolver(config_path=config_path, environ=environ).resolve(args)


def release(cfg: Config) -> None:
    """Release a resolved configuration. Must be called exactly once."""
    cfg.release()
    logger.debug("Configuration released")


@contextmanager
def resolved_config(
    args: Optional[Sequence[str]] = None,
    *,
    config_path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Iterator[Config]:
    """
    Resolve a configuration and release it on every exit path.

    Usage:
    ```
    with resolved_config(sys.argv[1:]) as cfg:
        serve(cfg)
    ```
    """
    cfg = resolve(args, config_path=config_path, environ=environ)
    try:
        yield cfg
    finally:
        release(cfg)
