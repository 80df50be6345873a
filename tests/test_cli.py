"""Tests for the lincol command line interface."""

import json

import pytest
from click.testing import CliRunner

from lincol import __version__
from lincol.cli import cli
from lincol.utils.exit_codes import ExitCodes
from lincol.utils.logging import logger


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


class TestGetCommand:
    def test_prints_line_and_column(self, runner, example_json_path):
        result = runner.invoke(cli, ["get", str(example_json_path), "/test/2/nested/foo"])
        assert result.exit_code == ExitCodes.SUCCESS, result.output
        assert result.output.strip() == "8:16"

    def test_yaml_file(self, runner, example_yaml_path):
        result = runner.invoke(cli, ["get", str(example_yaml_path), "/test/2/nested/foo"])
        assert result.exit_code == 0
        assert result.output.strip() == "6:12"

    def test_root_pointer(self, runner, example_yaml_path):
        result = runner.invoke(cli, ["get", str(example_yaml_path), ""])
        assert result.output.strip() == "1:1"

    def test_missing_pointer_exits_not_found(self, runner, example_json_path):
        result = runner.invoke(cli, ["get", str(example_json_path), "/test/9"])
        assert result.exit_code == ExitCodes.NOT_FOUND
        assert "could not find" in result.output

    def test_malformed_pointer(self, runner, example_json_path):
        result = runner.invoke(cli, ["get", str(example_json_path), "/a~2"])
        assert result.exit_code == ExitCodes.MALFORMED_POINTER
        assert "MalformedPointerError" in result.output

    def test_invalid_document(self, runner, write_document):
        path = write_document("broken.json", '{"a": [1, 2}')
        result = runner.invoke(cli, ["get", str(path), "/a"])
        assert result.exit_code == ExitCodes.PARSE_FAILED
        assert "ParseError" in result.output

    def test_format_option(self, runner, write_document):
        path = write_document("flow.txt", "[a, b]")
        result = runner.invoke(cli, ["get", str(path), "/1", "--format", "yaml"])
        assert result.exit_code == 0
        assert result.output.strip() == "1:5"

    def test_nonexistent_file_is_usage_error(self, runner, tmp_path):
        result = runner.invoke(cli, ["get", str(tmp_path / "nope.json"), ""])
        assert result.exit_code == 2


class TestDumpCommand:
    def test_json_output_in_document_order(self, runner, example_json_path):
        result = runner.invoke(cli, ["dump", str(example_json_path), "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert list(data)[:3] == ["", "/name", "/test"]
        assert data["/m~0n"] == {"line": 14, "column": 10}

    def test_table_output(self, runner, write_document):
        path = write_document("small.yml", "a: 1\nb: [x]\n")
        result = runner.invoke(cli, ["dump", str(path)])
        assert result.exit_code == 0, result.output
        assert "/b/0" in result.output

    def test_empty_document(self, runner, write_document):
        path = write_document("empty.yml", "# nothing\n")
        result = runner.invoke(cli, ["dump", str(path), "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {}


class TestCliMeta:
    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self, runner):
        result = runner.invoke(cli, ["-h"])
        assert result.exit_code == 0
        assert "get" in result.output
        assert "dump" in result.output

    def test_help_is_ascii(self, runner):
        for args in (["--help"], ["get", "--help"], ["dump", "--help"]):
            result = runner.invoke(cli, args)
            result.output.encode("ascii")


def test_exit_code_descriptions():
    assert "not present" in ExitCodes.get_description(ExitCodes.NOT_FOUND)
    assert ExitCodes.get_description(99) == "Unknown exit code: 99"


def test_log_dir_writes_debug_log(runner, example_yaml_path, tmp_path):
    log_dir = tmp_path / "logs"
    try:
        result = runner.invoke(cli, ["--log-dir", str(log_dir), "get", str(example_yaml_path), "/a~2"])
    finally:
        logger.disable("lincol")
    assert result.exit_code == ExitCodes.MALFORMED_POINTER
    log_text = (log_dir / "lincol.log").read_text(encoding="utf-8")
    assert "Indexed yaml source" in log_text
    assert ExitCodes.get_description(ExitCodes.MALFORMED_POINTER) in log_text


def test_deep_yaml_is_indexed(runner, write_document):
    depth = 2000
    path = write_document("deep.yml", "[" * depth + "x" + "]" * depth)
    result = runner.invoke(cli, ["get", str(path), "/0" * depth])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == f"1:{depth + 1}"
