import pytest

from dc_http.models.config import ServerMode, new_default_config
from dc_http.overrides.env import ENV_VARS, apply_env_config


def test_variable_names():
    assert ENV_VARS == {
        "port": "DC_HTTP_PORT",
        "mode": "DC_HTTP_MODE",
        "root_dir": "DC_HTTP_ROOT_DIR",
        "index_page": "DC_HTTP_INDEX_PAGE",
        "not_found_page": "DC_HTTP_NOT_FOUND_PAGE",
    }


def test_applies_every_valid_variable(site_dir):
    environ = {
        "DC_HTTP_PORT": "8080",
        "DC_HTTP_MODE": "Process",
        "DC_HTTP_ROOT_DIR": str(site_dir),
        "DC_HTTP_INDEX_PAGE": "/home.html",
        "DC_HTTP_NOT_FOUND_PAGE": "/missing.html",
    }
    cfg = new_default_config()

    apply_env_config(cfg, environ)

    assert cfg.port == 8080
    assert cfg.mode is ServerMode.PROCESS
    assert cfg.root_dir == str(site_dir)
    assert cfg.index_page == "/home.html"
    assert cfg.not_found_page == "/missing.html"
    assert set(cfg.sources.values()) == {"env"}


def test_absent_variables_leave_fields_untouched():
    cfg = new_default_config()

    apply_env_config(cfg, {})

    assert cfg.as_dict() == new_default_config().as_dict()


@pytest.mark.parametrize("raw", ["80abc", "abc", "", "70000", "-1", " 8080"])
def test_bad_port_is_discarded(raw):
    cfg = new_default_config()
    cfg.override("port", 81, "file")

    apply_env_config(cfg, {"DC_HTTP_PORT": raw})

    assert cfg.port == 81
    assert cfg.sources["port"] == "file"


def test_bad_mode_is_discarded():
    cfg = new_default_config()

    apply_env_config(cfg, {"DC_HTTP_MODE": "x"})

    assert cfg.mode is ServerMode.THREAD


def test_missing_root_dir_is_discarded(tmp_path):
    cfg = new_default_config()

    apply_env_config(cfg, {"DC_HTTP_ROOT_DIR": str(tmp_path / "nope")})

    assert cfg.root_dir == "../server_directory"


def test_empty_page_is_discarded():
    cfg = new_default_config()

    apply_env_config(cfg, {"DC_HTTP_INDEX_PAGE": ""})

    assert cfg.index_page == "/index.html"


def test_reads_process_environment_by_default(monkeypatch):
    monkeypatch.setenv("DC_HTTP_PORT", "9090")
    monkeypatch.setenv("DC_HTTP_MODE", "t")
    cfg = new_default_config()

    apply_env_config(cfg)

    assert cfg.port == 9090
    assert cfg.mode is ServerMode.THREAD
    assert cfg.sources["mode"] == "env"
