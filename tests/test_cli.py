"""Test the CLI command-line interface."""

import os
import subprocess
import sys
from pathlib import Path


SRC = os.pathsep.join(filter(None, [str(Path(__file__).parent.parent / "src"), os.environ.get("PYTHONPATH")]))


def run_cli(*args, stdin=None):
    return subprocess.run(
        [sys.executable, "-m", "numlit", *args],
        capture_output=True,
        text=True,
        input=stdin,
        env={**os.environ, "NO_COLOR": "1", "PYTHONPATH": SRC},
    )


def test_cli_show_integer():
    result = run_cli("show", "0b1010")

    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    lines = result.stdout.splitlines()
    assert lines[0] == "0b1010"
    assert lines[1].split() == ["*", "BIN", "1010"]
    assert lines[4].split() == ["HEX", "A"]


def test_cli_show_float():
    result = run_cli("show", "6.022e23")

    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    assert "SCI" in result.stdout
    assert "* SCI  6.022e+23" in result.stdout


def test_cli_show_unrecognized():
    result = run_cli("show", "0xFF", "nope")

    assert result.returncode == 1
    assert "HEX" in result.stdout
    assert "'nope' is not a number literal" in result.stderr


def test_cli_convert():
    result = run_cli("convert", "--to", "hex", "255", "0b1010", "3.5")

    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    assert result.stdout.splitlines() == ["0xFF", "0xA", "3.5"]


def test_cli_convert_floats_unchanged():
    result = run_cli("convert", "--to", "dec", "1,000.5", "1e400", "0x10")

    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    assert result.stdout.splitlines() == ["1,000.5", "1e400", "16"]


def test_cli_show_long_literal():
    result = run_cli("show", "9" * 5000)

    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    assert "9" * 5000 in result.stdout


def test_cli_convert_bare():
    result = run_cli("convert", "--to", "bin", "--bare", "10")

    assert result.returncode == 0
    assert result.stdout.strip() == "1010"


def test_cli_convert_unrecognized():
    result = run_cli("convert", "--to", "dec", "0x10", "nope")

    assert result.returncode == 1
    assert result.stdout.splitlines() == ["16", "nope"]
    assert "nope" in result.stderr


def test_cli_lang():
    result = run_cli("--lang", "python", "convert", "--to", "dec", "1_000", "1,000")

    assert result.returncode == 1
    assert result.stdout.splitlines() == ["1000", "1,000"]


def test_cli_signed():
    result = run_cli("--signed", "convert", "--to", "hex", "-255")

    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    assert result.stdout.strip() == "-0xFF"


def test_cli_replace_stdin():
    result = run_cli("replace", "--to", "hex", stdin="x = 255\ny = 3.5\n")

    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    assert result.stdout == "x = 0xFF\ny = 3.5\n"


def test_cli_replace_file(tmp_path):
    source = tmp_path / "flags.c"
    source.write_text("int flags = 0x0F | 0x30;\n", encoding="utf-8")

    result = run_cli("replace", "--to", "bin", str(source))

    assert result.returncode == 0, f"CLI failed: {result.stderr}"
    assert result.stdout == "int flags = 0b1111 | 0b110000;\n"


def test_cli_langs():
    result = run_cli("langs")

    assert result.returncode == 0
    assert "python" in result.stdout
    assert "*  default" in result.stdout


def test_cli_bad_base():
    result = run_cli("convert", "--to", "trinary", "1")

    assert result.returncode == 2
    assert "Unknown base" in result.stderr


def test_cli_no_args():
    result = run_cli()

    assert result.returncode == 2
    assert "usage:" in result.stderr


def test_format_summary_color():
    import numlit
    from numlit import cli, _colorize

    parser = numlit.default_parser()
    text = cli.format_summary(parser.classify("0o17"), parser, color=True)
    lines = text.splitlines()
    assert lines[1].startswith(_colorize.CODES["strong"])
    assert lines[0].startswith(_colorize.CODES["dim"])
    assert all(line.endswith(_colorize.CODES["normal"]) for line in lines)
    assert "17" in lines[1]


def test_should_use_color(monkeypatch):
    from numlit import _colorize

    class Tty:
        def isatty(self):
            return True

    monkeypatch.delenv("NO_COLOR", raising=False)
    assert _colorize.should_use_color(Tty())
    assert not _colorize.should_use_color(object())
    monkeypatch.setenv("NO_COLOR", "")
    assert not _colorize.should_use_color(Tty())


def test_cli_replace_missing_file(tmp_path):
    result = run_cli("replace", "--to", "hex", str(tmp_path / "missing.c"))

    assert result.returncode == 1
    assert "File not found" in result.stderr
