"""Unit tests for tagtree.cli.main — the click application."""
from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from tagtree.cli.main import cli

_YAML_TREE = """\
kind: Element
name: ul
children:
  - {kind: Attribute, name: class, value: list}
  - kind: Element
    name: li
    children: ["a & b"]
"""

_JSON_TREE = '{"kind": "Element", "name": "br", "children": []}'


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def yaml_file(tmp_path: Path) -> Path:
    path = tmp_path / "page.yaml"
    path.write_text(_YAML_TREE, encoding="utf-8")
    return path


class TestVersion:
    def test_version_command(self, runner: CliRunner, expected_version: str) -> None:
        result = runner.invoke(cli, ["version"])
        assert result.exit_code == 0
        assert expected_version in result.output


class TestVoidElements:
    def test_lists_void_elements(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["void-elements"])
        assert result.exit_code == 0
        assert "input_" in result.output
        assert "keygen" in result.output


class TestRender:
    def test_render_yaml_to_stdout(self, runner: CliRunner, yaml_file: Path) -> None:
        result = runner.invoke(cli, ["render", str(yaml_file)])
        assert result.exit_code == 0
        assert '<ul class="list"><li>a &amp; b</li></ul>' in result.output

    def test_render_json_detected_by_extension(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "tree.json"
        path.write_text(_JSON_TREE, encoding="utf-8")
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 0
        assert "<br>" in result.output

    def test_render_to_file(self, runner: CliRunner, yaml_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "out.html"
        result = runner.invoke(cli, ["render", str(yaml_file), "--output", str(out)])
        assert result.exit_code == 0
        assert out.read_bytes() == b'<ul class="list"><li>a &amp; b</li></ul>'

    def test_explicit_format_overrides_extension(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "tree.txt"
        path.write_text(_JSON_TREE, encoding="utf-8")
        result = runner.invoke(cli, ["render", str(path), "--format", "json"])
        assert result.exit_code == 0
        assert "<br>" in result.output

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["render", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 1

    def test_invalid_tree(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("kind: Comment\n", encoding="utf-8")
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 1

    def test_invalid_json(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 1

    def test_invalid_yaml(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("kind: [unclosed\n", encoding="utf-8")
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 1

    def test_empty_description(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 1

    def test_group_root_exits_cleanly(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "group.yaml"
        path.write_text("kind: Group\nchildren: [hi]\n", encoding="utf-8")
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)

    def test_verbose_flag_accepted(self, runner: CliRunner, yaml_file: Path) -> None:
        result = runner.invoke(cli, ["--verbose", "render", str(yaml_file)])
        assert result.exit_code == 0


class TestDump:
    def test_dump_expands_shorthand(self, runner: CliRunner, yaml_file: Path) -> None:
        result = runner.invoke(cli, ["dump", str(yaml_file)])
        assert result.exit_code == 0
        assert "kind: Text" in result.output
        assert "escape: true" in result.output

    def test_dump_to_json(self, runner: CliRunner, yaml_file: Path) -> None:
        result = runner.invoke(cli, ["dump", str(yaml_file), "--to", "json"])
        assert result.exit_code == 0
        assert '"kind": "Element"' in result.output
