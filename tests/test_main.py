import logging

import pytest

import flagstream.__main__ as cli_main
from flagstream import __version__
from flagstream.__main__ import FlagstreamCLI, main, render_trace
from flagstream.exceptions import ArgumentError
from flagstream.parser import parse
from flagstream.signals import HelpSignal, VersionSignal


@pytest.fixture(autouse=True)
def logging_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(cli_main, "setup_logging", lambda **kwargs: calls.append(kwargs))
    return calls


def test_cli_parses_options():
    cli = parse(
        FlagstreamCLI,
        ["-vv", "--log-mode", "json", "--log-file=out.log", "trace", "--x", "y"],
    )
    assert cli.verbose == 2
    assert cli.log_mode == "json"
    assert cli.log_file == "out.log"
    assert cli.command == "trace"
    assert cli.command_args == ["--x", "y"]


def test_cli_help_signal():
    with pytest.raises(HelpSignal):
        parse(FlagstreamCLI, ["--help"])


def test_cli_version_in_cluster():
    with pytest.raises(VersionSignal):
        parse(FlagstreamCLI, ["-vV"])


def test_cli_rejects_log_mode():
    with pytest.raises(ArgumentError, match="--log-mode"):
        parse(FlagstreamCLI, ["--log-mode", "xml", "trace"])


def test_cli_rejects_unknown_command():
    with pytest.raises(ArgumentError, match="Unknown command 'frobnicate'"):
        parse(FlagstreamCLI, ["frobnicate"])


def test_main_no_arguments(capsys):
    assert main([]) == 2
    out = capsys.readouterr().out
    assert "No arguments given" in out
    assert "for more information" in out


def test_main_help(capsys):
    assert main(["--help"]) == 0
    out = capsys.readouterr().out
    assert f"flagstream v{__version__}" in out
    assert "usage: flagstream [OPTIONS] trace [TOKENS...]" in out


def test_main_version(capsys):
    assert main(["-V"]) == 0
    assert capsys.readouterr().out.strip() == f"flagstream v{__version__}"


def test_main_unknown_flag(capsys):
    assert main(["--bogus"]) == 2
    assert "Unrecognized option" in capsys.readouterr().out


def test_main_requires_command(capsys, logging_calls):
    assert main(["-v"]) == 2
    assert "No command given" in capsys.readouterr().out
    assert logging_calls == []


def test_main_trace(capsys, logging_calls):
    assert main(["trace", "--out=a.txt", "-xy", "file"]) == 0
    out = capsys.readouterr().out
    assert "Token classification" in out
    assert "a.txt" in out
    assert "long" in out
    assert "short" in out
    assert "positional" in out
    assert logging_calls == [
        {"mode": None, "log_filename": None, "console_log_level": logging.WARNING}
    ]


def test_main_verbose_logging(logging_calls):
    assert main(["-v", "--log-mode", "json", "trace"]) == 0
    assert logging_calls == [
        {"mode": "json", "log_filename": None, "console_log_level": logging.DEBUG}
    ]


def test_render_trace_rows():
    table = render_trace(["--a=b", "-", "-cd"])
    assert table.row_count == 3
