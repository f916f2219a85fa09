import io
import logging
import sys

import pytest

from hostsmerge.cli import main, parse_args
from hostsmerge.rewrite import RewriteMode


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "HOSTSMERGE_INPUT",
        "HOSTSMERGE_OUTPUT",
        "HOSTSMERGE_APPEND",
        "HOSTSMERGE_REWRITE",
        "HOSTSMERGE_REWRITE_ALL",
        "HOSTSMERGE_GLOB",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    yield
    logger = logging.getLogger("hostsmerge")
    logger.setLevel(logging.NOTSET)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


def test_parse_args_defaults():
    config = parse_args([])
    assert config.input_path == "-"
    assert config.output_path == "-"
    assert config.rewrite == RewriteMode.NONE.value
    assert config.append is False


def test_last_rewrite_flag_wins():
    assert parse_args(["-d", "-l"]).rewrite == RewriteMode.LOOPBACK.value
    assert parse_args(["--loopback", "-6"]).rewrite == RewriteMode.LOOPBACK6.value


def test_parse_args_overrides_env(monkeypatch):
    monkeypatch.setenv("HOSTSMERGE_REWRITE", "loopback")
    monkeypatch.setenv("HOSTSMERGE_OUTPUT", "/tmp/env-output")
    config = parse_args(["-d", "-A", "-a", "-g", "*.txt", "-vv", "in", "out"])
    assert config.rewrite == RewriteMode.DEFAULT.value
    assert config.rewrite_all is True
    assert config.append is True
    assert config.pattern == "*.txt"
    assert config.log_level == "DEBUG"
    assert config.input_path == "in"
    assert config.output_path == "out"


def test_env_used_when_flag_absent(monkeypatch):
    monkeypatch.setenv("HOSTSMERGE_REWRITE", "loopback")
    assert parse_args([]).rewrite == RewriteMode.LOOPBACK.value


def test_merge_directory_to_file(tmp_path):
    source = tmp_path / "hosts.d"
    source.mkdir()
    (source / "blocklist.hosts").write_text("127.0.0.1 ads.example\n0.0.0.0 tracker.example\n")
    (source / "local.hosts").write_text("192.168.1.10 nas # storage\n")
    (source / "README").write_text("192.168.1.99 ignored\n")
    target = tmp_path / "out" / "hosts"

    status = main(["-d", "-g", "*.hosts", str(source), str(target)])

    assert status == 0
    assert target.read_text() == (
        "0.0.0.0 ads.example\n"
        "0.0.0.0 tracker.example\n"
        "192.168.1.10 nas # storage\n"
    )


def test_append_mode(tmp_path):
    source = tmp_path / "in.hosts"
    source.write_text("1.2.3.4 b\n")
    target = tmp_path / "hosts"
    target.write_text("# header\n")

    assert main(["-a", str(source), str(target)]) == 0
    assert target.read_text() == "# header\n1.2.3.4 b\n"


def test_truncate_mode(tmp_path):
    source = tmp_path / "in.hosts"
    source.write_text("1.2.3.4 b\n")
    target = tmp_path / "hosts"
    target.write_text("old content\n")

    assert main([str(source), str(target)]) == 0
    assert target.read_text() == "1.2.3.4 b\n"


def test_stdin_to_stdout(monkeypatch, capsysbinary):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"0.0.0.0 x\n127.0.0.1 x\n")))
    assert main(["-l", "-"]) == 0
    assert capsysbinary.readouterr().out == b"127.0.0.1 x\n"


def test_missing_input(tmp_path):
    assert main([str(tmp_path / "missing"), str(tmp_path / "out")]) == 1


def test_invalid_config(monkeypatch, capsys):
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    assert main([]) == 1
    assert "LOG_LEVEL" in capsys.readouterr().err


def test_missing_input_is_logged_once(tmp_path, caplog):
    with caplog.at_level(logging.ERROR, logger="hostsmerge"):
        assert main([str(tmp_path / "missing"), str(tmp_path / "out")]) == 1

    errors = [record for record in caplog.records if record.levelno >= logging.ERROR]
    assert len(errors) == 1
    assert errors[0].exc_info is None
    assert "missing" in errors[0].getMessage()
