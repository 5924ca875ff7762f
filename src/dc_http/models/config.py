"""
Resolved server configuration and its defaults.
"""

from enum import Enum
from typing import Any, Dict, Literal, Optional

from pydantic import Field, PrivateAttr

from dc_http.core.exceptions import ConfigReleasedError
from dc_http.core.validators import MAX_PORT, valid_mode
from dc_http.models.base import DcHttpBaseModel

DEFAULT_PORT = 80
DEFAULT_ROOT_DIR = "../server_directory"
DEFAULT_INDEX_PAGE = "/index.html"
DEFAULT_NOT_FOUND_PAGE = "/404.html"

CONFIG_FIELDS = ("port", "mode", "root_dir", "index_page", "not_found_page")

SourceLabel = Literal["default", "file", "env", "cmdline"]


class ServerMode(str, Enum):
    """How the server handles concurrent connections."""

    PROCESS = "process"
    THREAD = "thread"

    @classmethod
    def parse(cls, raw: Any) -> Optional["ServerMode"]:
        """Map free text to a mode by its first letter; None if not recognised."""
        if not valid_mode(raw):
            return None
        return cls.PROCESS if raw[0].lower() == "p" else cls.THREAD

    @property
    def letter(self) -> str:
        return self.value[0]


class Config(DcHttpBaseModel):
    """
    Effective runtime configuration for the HTTP server.

    Built from defaults, then overridden in place by the file, environment
    and command-line stages. Each field keeps track of the layer that set
    its current value. Once handed to consumers it is treated as read-only.
    """

    port: int = Field(default=DEFAULT_PORT, ge=0, le=MAX_PORT, strict=True)
    mode: ServerMode = Field(default=ServerMode.THREAD)
    root_dir: str = Field(default=DEFAULT_ROOT_DIR, min_length=1)
    index_page: str = Field(default=DEFAULT_INDEX_PAGE, min_length=1)
    not_found_page: str = Field(default=DEFAULT_NOT_FOUND_PAGE, min_length=1)

    _sources: Dict[str, SourceLabel] = PrivateAttr(
        default_factory=lambda: {name: "default" for name in CONFIG_FIELDS}
    )
    _released: bool = PrivateAttr(default=False)

    def override(self, field: str, value: Any, source: SourceLabel) -> None:
        """Replace a field with an already validated candidate."""
        if self._released:
            raise ConfigReleasedError(
                f"Cannot override '{field}' on a released configuration",
                context={"field": field, "source": source},
            )
        if field not in CONFIG_FIELDS:
            raise KeyError(field)
        setattr(self, field, value)
        self._sources[field] = source

    @property
    def sources(self) -> Dict[str, SourceLabel]:
        """Layer that supplied each field's current value."""
        return dict(self._sources)

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Release the configuration. Allowed exactly once."""
        if self._released:
            raise ConfigReleasedError("Configuration already released")
        self._released = True

    def as_dict(self) -> Dict[str, Any]:
        """Plain values for the server and editor layers."""
        return {
            "port": self.port,
            "mode": self.mode.value,
            "root_dir": self.root_dir,
            "index_page": self.index_page,
            "not_found_page": self.not_found_page,
        }


def new_default_config() -> Config:
    """Fresh configuration holding the built-in defaults."""
    return Config()
