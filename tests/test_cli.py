"""Tests for the command-line interface."""

import json
import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from javastruct.cli import main


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "Foo.java"
    path.write_text("package demo;\npublic class Foo {\n    private int x;\n}\n")
    return path


class TestParseCommand:
    def test_tree_output(self, source_file, capsys):
        assert main(["parse", str(source_file)]) == 0
        out = capsys.readouterr().out
        assert out.startswith(f"{source_file}:\n")
        assert "package: demo" in out
        assert "public class Foo" in out
        assert "private int x" not in out
        assert "private Int x" in out

    def test_json_output(self, source_file, capsys):
        assert main(["parse", "--format", "json", str(source_file)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["package"] == "demo"
        assert data["classes"][0]["fields"][0]["name"] == "x"

    def test_missing_file(self, tmp_path, capsys):
        assert main(["parse", str(tmp_path / "Missing.java")]) == 1
        assert "Error: Cannot read" in capsys.readouterr().err

    def test_parse_error_does_not_stop_other_files(self, tmp_path, source_file, capsys):
        broken = tmp_path / "Broken.java"
        broken.write_text("class Broken {")
        assert main(["parse", str(broken), str(source_file)]) == 1
        captured = capsys.readouterr()
        assert f"Error parsing {broken}: Incomplete input" in captured.err
        assert "public class Foo" in captured.out

    def test_strict_flag(self, tmp_path, capsys):
        path = tmp_path / "Twice.java"
        path.write_text("package a;\npackage b;\n")
        assert main(["parse", "--strict", str(path)]) == 1
        assert "duplicate package declaration" in capsys.readouterr().err
        assert main(["parse", str(path)]) == 0

    def test_no_command(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out
