import pytest

from dc_http.models.config import ServerMode, new_default_config
from dc_http.overrides.cmdline import (
    CMDLINE_OPTIONS,
    OptionScanner,
    apply_cmdline_config,
    find_config_file_option,
)


def test_applies_every_option(site_dir):
    args = [
        "--port=8080",
        "--mode=p",
        f"--root-dir={site_dir}",
        "--index-page=/home.html",
        "--not-found-page=/missing.html",
    ]
    cfg = new_default_config()

    apply_cmdline_config(cfg, args)

    assert cfg.port == 8080
    assert cfg.mode is ServerMode.PROCESS
    assert cfg.root_dir == str(site_dir)
    assert cfg.index_page == "/home.html"
    assert cfg.not_found_page == "/missing.html"
    assert set(cfg.sources.values()) == {"cmdline"}


@pytest.mark.parametrize(
    "args, expected",
    [
        (["--port=8080"], 8080),
        (["--port=999999"], 80),
        (["--port=abc"], 80),
        (["--port=80abc"], 80),
        (["--port="], 80),
        (["--port"], 80),
        (["--port", "8080"], 80),
        (["--portx=8080"], 80),
        (["--po=8080"], 80),
        (["-p", "8080"], 80),
    ],
)
def test_port_option(args, expected):
    cfg = new_default_config()

    apply_cmdline_config(cfg, args)

    assert cfg.port == expected


def test_mode_is_case_insensitive():
    cfg = new_default_config()

    apply_cmdline_config(cfg, ["--mode=P"])

    assert cfg.mode is ServerMode.PROCESS


def test_missing_root_dir_is_discarded(site_dir, tmp_path):
    cfg = new_default_config()
    cfg.override("root_dir", str(site_dir), "file")

    apply_cmdline_config(cfg, [f"--root-dir={tmp_path / 'nope'}"])

    assert cfg.root_dir == str(site_dir)
    assert cfg.sources["root_dir"] == "file"


def test_unknown_options_and_positionals_are_ignored():
    cfg = new_default_config()

    apply_cmdline_config(cfg, ["serve", "--verbose", "--host=0.0.0.0", "--port=81", "extra"])

    assert cfg.port == 81


def test_last_valid_occurrence_wins():
    cfg = new_default_config()

    apply_cmdline_config(cfg, ["--port=81", "--port=82", "--port=bad"])

    assert cfg.port == 82


def test_double_dash_ends_options():
    cfg = new_default_config()

    apply_cmdline_config(cfg, ["--port=81", "--", "--port=82"])

    assert cfg.port == 81


def test_value_may_contain_equals_sign():
    cfg = new_default_config()

    apply_cmdline_config(cfg, ["--index-page=/index.html?a=b"])

    assert cfg.index_page == "/index.html?a=b"


def test_scanner_yields_recognised_options():
    scanner = OptionScanner(["--port=1", "--other=2", "--mode", "word"], CMDLINE_OPTIONS)

    assert list(scanner) == [("--port", "1"), ("--mode", None)]
    assert scanner.position == 4
    assert list(scanner) == []


def test_scanner_reset():
    scanner = OptionScanner(["--port=1"], CMDLINE_OPTIONS)
    list(scanner)

    scanner.reset()
    assert list(scanner) == [("--port", "1")]

    scanner.reset(["--mode=t"])
    assert list(scanner) == [("--mode", "t")]


def test_reused_scanner_gives_same_result():
    scanner = OptionScanner([], CMDLINE_OPTIONS)
    args = ["--port=8080", "--mode=p"]

    first = new_default_config()
    apply_cmdline_config(first, args, scanner)
    second = new_default_config()
    apply_cmdline_config(second, args, scanner)

    assert first.as_dict() == second.as_dict()
    assert second.port == 8080


def test_find_config_file_option():
    assert find_config_file_option(["--port=1"]) is None
    assert find_config_file_option(["--config-file=a.yaml"]) == "a.yaml"
    assert find_config_file_option(["--config-file=a.yaml", "--config-file=b.yaml"]) == "b.yaml"
    assert find_config_file_option(["--config-file"]) is None


def test_config_file_option_does_not_touch_fields():
    cfg = new_default_config()

    apply_cmdline_config(cfg, ["--config-file=other.yaml"])

    assert set(cfg.sources.values()) == {"default"}


def test_unambiguous_prefixes_are_not_expanded(site_dir):
    cfg = new_default_config()

    apply_cmdline_config(cfg, ["--po=8080", f"--root={site_dir}", "--not-found=/gone.html"])

    assert cfg.port == 80
    assert cfg.root_dir == "../server_directory"
    assert cfg.not_found_page == "/404.html"
    assert set(cfg.sources.values()) == {"default"}
