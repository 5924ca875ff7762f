"""
Shared pytest fixtures for dc-http tests.
"""

from pathlib import Path
from typing import Any, Callable, Dict, Union

import pytest
import yaml

from dc_http.overrides.env import ENV_VARS
from dc_http.core.secure_config import CONFIG_FILE_ENV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's DC_HTTP_* variables out of the tests."""
    for name in list(ENV_VARS.values()) + [CONFIG_FILE_ENV]:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """An existing directory usable as root_dir."""
    path = tmp_path / "site"
    path.mkdir()
    return path


@pytest.fixture
def other_site_dir(tmp_path: Path) -> Path:
    path = tmp_path / "other_site"
    path.mkdir()
    return path


@pytest.fixture
def missing_config(tmp_path: Path) -> Path:
    """Path of a config file that does not exist."""
    return tmp_path / "absent.yaml"


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[Union[Dict[str, Any], str]], Path]:
    """Write a YAML config file (mapping or raw text) and return its path."""

    def _write(content: Union[Dict[str, Any], str], name: str = "config.yaml") -> Path:
        path = tmp_path / name
        text = content if isinstance(content, str) else yaml.safe_dump(content)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
