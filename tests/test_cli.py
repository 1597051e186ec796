"""Tests for the securegen command-line interface."""

import re

from securegen import CHARSETS
from securegen.cli import main


class TestGenerateCommand:
    def test_default(self, capsys):
        assert main(["generate"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 1
        pwd = lines[0].split()[0]
        assert len(pwd) == 20

    def test_count_and_length(self, capsys):
        assert main(["generate", "-n", "12", "-c", "3"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        assert all(len(line.split()[0]) == 12 for line in lines)

    def test_length_clamped(self, capsys):
        main(["generate", "-n", "2"])
        assert len(capsys.readouterr().out.split()[0]) == 4

    def test_no_symbols(self, capsys):
        main(["generate", "--no-symbols", "--no-numbers", "-c", "5"])
        for line in capsys.readouterr().out.splitlines():
            assert line.split()[0].isalpha()

    def test_all_disabled_warns(self, capsys):
        rc = main([
            "generate", "--no-uppercase", "--no-lowercase",
            "--no-numbers", "--no-symbols",
        ])
        out, err = capsys.readouterr()
        assert rc == 0
        assert "at least one character type" in err
        assert all(c in CHARSETS["uppercase"] for c in out.split()[0])


class TestUuidCommand:
    def test_count(self, capsys):
        assert main(["uuid", "-c", "2"]) == 0
        lines = capsys.readouterr().out.split()
        assert len(lines) == 2
        assert all(re.match(r"^[0-9a-f-]{36}$", u) for u in lines)


class TestCheckCommand:
    def test_args(self, capsys):
        assert main(["check", "xK7!mP2$nQ8&"]) == 0
        assert "Strong" in capsys.readouterr().out

    def test_file(self, tmp_path, capsys):
        f = tmp_path / "pw.txt"
        f.write_text("aaa\n\nxK7!mP2$nQ8&\n")
        assert main(["check", "-f", str(f)]) == 0
        out = capsys.readouterr().out
        assert "'aaa'" in out
        assert "Repeated" in out

    def test_nothing_to_check(self, capsys):
        assert main(["check"]) == 1
        assert "Error" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()
