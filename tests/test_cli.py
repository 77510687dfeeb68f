"""Tests for charstat/cli.py"""

import io
import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from charstat import __version__
from charstat import cli
from charstat.cli import build_parser, configure_logging, log_level, main, open_input
from charstat.config import ReportOptions
from charstat.errors import InputError


@pytest.fixture
def stdin_bytes(monkeypatch):
    def feed(data):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))
    return feed


def test_reads_named_file(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_bytes(b"AAB")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "A (Lu U+0041 0x41) 2\nB (Lu U+0042 0x42) 1\n"


def test_reads_stdin(stdin_bytes, capsys):
    stdin_bytes(b"123")
    assert main(["--no-chars", "--cats", "--scripts"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "// Categories",
        "N  Number                3",
        "Nd Number, decimal digit 3",
        "// Scripts",
        f"{'Common':<24} 3",
    ]


def test_invalid_bytes_truncate_report(stdin_bytes, capsys):
    stdin_bytes(b"abc\xff\xfedef")
    assert main(["--cats"]) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == [
        "// Characters",
        "a (Ll U+0061 0x61) 1",
        "b (Ll U+0062 0x62) 1",
        "c (Ll U+0063 0x63) 1",
        "// Categories",
        "L  Letter                3",
        "Ll Letter, lowercase     3",
    ]


def test_empty_input(stdin_bytes, capsys):
    stdin_bytes(b"")
    assert main(["--cats", "--scripts"]) == 0
    assert capsys.readouterr().out == "// Characters\n// Categories\n// Scripts\n"


def test_missing_file_is_fatal(tmp_path, capsys, caplog):
    missing = tmp_path / "nope.txt"
    with caplog.at_level(logging.ERROR):
        assert main([str(missing), "--cats"]) == 1
    assert capsys.readouterr().out == ""
    assert "nope.txt" in caplog.text


def test_open_input_raises_input_error(tmp_path):
    with pytest.raises(InputError) as excinfo:
        open_input(str(tmp_path / "missing"))
    assert excinfo.value.path.endswith("missing")


def test_short_and_utf8_flags(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("é", encoding="utf-8")
    assert main([str(path), "--utf8", "--cats", "--short"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "// Characters",
        "é (Ll U+00E9 0xe9 0xc3 0xa9) 1",
        "// Categories",
        "L  1",
        "Ll 1",
    ]


def test_options_from_args():
    args = build_parser().parse_args(["--no-chars", "--scripts", "--short"])
    options = ReportOptions.from_args(args)
    assert (options.chars, options.cats, options.scripts) == (False, False, True)
    assert options.long_names is False
    assert options.utf8 is False


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


@pytest.mark.parametrize("verbosity, level", [
    (0, logging.WARNING),
    (1, logging.INFO),
    (2, logging.DEBUG),
    (5, logging.DEBUG),
])
def test_log_level(verbosity, level):
    assert log_level(verbosity) == level


def test_configure_logging_uses_stderr(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    configure_logging(1)
    assert calls[0]["level"] == logging.INFO
    assert calls[0]["stream"] is sys.stderr


def test_verbose_logs_character_totals(tmp_path, capsys, caplog):
    path = tmp_path / "input.txt"
    path.write_bytes(b"AAB")
    with caplog.at_level(logging.INFO, logger="charstat.cli"):
        assert main(["-v", str(path)]) == 0
    assert "Read 3 characters, 2 distinct" in caplog.text
    assert "Read 3 characters" not in capsys.readouterr().out


def test_interrupt_exits_130(tmp_path, monkeypatch):
    def interrupted(args):
        raise KeyboardInterrupt
    monkeypatch.setattr(cli, "run", interrupted)
    assert main([str(tmp_path / "input.txt")]) == 130


def test_closed_output_pipe(tmp_path):
    """Writing into a pipe nobody reads ends with status 1 and no traceback."""
    path = tmp_path / "input.txt"
    path.write_text("".join(chr(cp) for cp in range(0x100, 0x2000)), encoding="utf-8")
    read_fd, write_fd = os.pipe()
    os.close(read_fd)
    env = dict(os.environ)
    root = str(Path(__file__).resolve().parent.parent)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [root, env.get("PYTHONPATH")]))
    try:
        proc = subprocess.run(
            [sys.executable, "-m", "charstat", str(path)],
            stdout=write_fd,
            stderr=subprocess.PIPE,
            env=env,
            timeout=60,
        )
    finally:
        os.close(write_fd)
    assert proc.returncode == 1
    assert b"Traceback" not in proc.stderr
