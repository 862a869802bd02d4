# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI tests for the demo, help and parse commands."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from optscan.cli import app
from optscan.cli.demo import DEMO_PARSER, render_demo


def test_render_demo_reports_in_order() -> None:
    report = render_demo(["-o", "out.txt", "-pX", "--long-option-only", "-s", "file"])

    assert report.splitlines() == [
        "Output file: out.txt",
        "-p given with argument: X",
        "--long-option-only given",
        "-s given",
        "Non-option argument: file",
    ]


def test_demo_command_prints_report() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["demo", "--long-option-with-arg", "v", "-p", "rest"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "--long-option-with-arg given with argument: v",
        "-p given with argument: rest",
    ]


def test_demo_help_stops_the_report() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["demo", "-s", "-h", "ignored"])

    assert result.exit_code == 0
    assert result.stdout == "-s given\n" + DEMO_PARSER.help_text


def test_demo_keeps_double_dash_for_the_catalog() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["demo", "-s", "--", "-h"])

    assert result.exit_code == 0
    assert result.stdout == "-s given\nNon-option argument: -h\n"
    assert result.stdout == render_demo(["-s", "--", "-h"])


def test_demo_long_help_prints_catalog_help() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["demo", "--help"])

    assert result.exit_code == 0
    assert result.stdout == DEMO_PARSER.help_text


def test_demo_without_tokens_prints_nothing() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["demo"])

    assert result.exit_code == 0
    assert result.stdout == ""


def test_demo_reports_parse_errors() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["demo", "--nope"])

    assert result.exit_code == 1
    assert "Unknown option: --nope" in result.output


def test_help_command_prints_demo_help() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["help"])

    assert result.exit_code == 0
    assert result.stdout == DEMO_PARSER.help_text
    assert "  -o, --output <file>" in result.stdout


def test_parse_command_json_payload() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["parse", "--json", "--", "-s", "-ofile", "x"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["options"] == [
        {"option": "-s", "identifier": ord("s"), "argument": None},
        {"option": "-o", "identifier": ord("o"), "argument": "file"},
    ]
    assert payload["positionals"] == ["x"]
    assert payload["remainder"] == []


def test_parse_command_stop_before_first_error() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["parse", "--json", "--stop", "before_first_error", "--", "-s", "--nope", "x"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert [entry["option"] for entry in payload["options"]] == ["-s"]
    assert payload["remainder"] == ["--nope", "x"]


def test_parse_command_renders_table() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["parse", "--stop", "after_first_positional", "--", "cmd", "-s"])

    assert result.exit_code == 0
    assert "Parse result" in result.stdout
    assert "positional" in result.stdout
    assert "remainder" in result.stdout


def test_parse_command_with_catalog_file(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps({"options": [{"id": "q", "long": "quiet"}, {"id": 2000, "long": "level", "argument": "required"}]}),
        encoding="utf-8",
    )
    runner = CliRunner()

    result = runner.invoke(app, ["parse", "--json", "--catalog", str(path), "--", "--level", "3", "-q"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["options"] == [
        {"option": "--level", "identifier": 2000, "argument": "3"},
        {"option": "-q", "identifier": ord("q"), "argument": None},
    ]


def test_invalid_catalog_exits_with_status_two(tmp_path: Path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"options": [{"id": "q"}, {"id": "q"}]}), encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["help", "--catalog", str(path)])

    assert result.exit_code == 2
    assert "Duplicate option identifier" in result.output


def test_command_help_lists_options_alphabetically() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["parse", "--help"])

    assert result.exit_code == 0
    options_section = result.stdout.split("Options:", 1)[1]
    positions = [options_section.index(flag) for flag in ("--catalog", "--help", "--json", "--stop")]
    assert positions == sorted(positions)


def test_group_help_lists_commands() -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    commands_section = result.stdout.split("Commands:", 1)[1]
    positions = [commands_section.index(name) for name in ("demo", "help", "parse")]
    assert positions == sorted(positions)


def test_help_command_warns_about_empty_catalog(tmp_path: Path) -> None:
    path = tmp_path / "empty.json"
    path.write_text(json.dumps({"options": []}), encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["help", "--catalog", str(path)])

    assert result.exit_code == 0
    assert "catalog declares no options" in result.output
