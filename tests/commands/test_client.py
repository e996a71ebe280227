"""Tests for the client command group."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from hairstylex.cli import cli
from tests.conftest import CLIENT_ARGS, HAIRDRESSER_ARGS


def _json(runner: CliRunner, args: list[str]) -> dict:
    result = runner.invoke(cli, ["--json", *args])
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


@pytest.mark.usefixtures("_isolated_project")
class TestClientAdd:
    def test_add(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, CLIENT_ARGS)
        assert result.exit_code == 0
        assert "New client added: #1 Alice Tan (91112222)" in result.output

    def test_add_json(self, cli_runner: CliRunner) -> None:
        data = _json(cli_runner, [*CLIENT_ARGS, "--tag", "vip,regular"])
        assert data["ok"] is True
        assert data["op"] == "add_client"
        assert data["data"]["entity"]["id"] == 1
        assert data["data"]["entity"]["tags"] == ["regular", "vip"]

    def test_add_persists(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        cli_runner.invoke(cli, CLIENT_ARGS)
        saved = json.loads((tmp_path / "data" / "hairstylex.json").read_text())
        assert saved["clients"][0]["details"]["name"] == "Alice Tan"

    def test_duplicate(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, CLIENT_ARGS)
        result = cli_runner.invoke(cli, CLIENT_ARGS)
        assert result.exit_code == 1
        assert "This client already exists in HairStyleX." in result.output

    def test_already_a_hairdresser(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, HAIRDRESSER_ARGS)
        args = [*CLIENT_ARGS]
        args[2:5] = ["Ben Ong", "--phone", "81234567"]
        result = cli_runner.invoke(cli, ["--json", *args])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "ROLE_CONFLICT"
        assert data["error"]["message"] == (
            "This person already exists in HairStyleX, and is a Hairdresser"
        )

    def test_missing_required_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["client", "add", "Alice Tan", "--phone", "91112222"])
        assert result.exit_code == 2
        assert "Missing option" in result.output

    def test_invalid_phone(self, cli_runner: CliRunner) -> None:
        args = [*CLIENT_ARGS]
        args[4] = "91-11"
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 1
        assert "phone:" in result.output

    def test_invalid_gender(self, cli_runner: CliRunner) -> None:
        args = [*CLIENT_ARGS]
        args[8] = "X"
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 2


@pytest.mark.usefixtures("_isolated_project")
class TestClientEdit:
    def test_edit_phone(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, CLIENT_ARGS)
        data = _json(cli_runner, ["client", "edit", "1", "--phone", "93334444"])
        assert data["data"]["fields_changed"] == ["phone"]
        assert data["data"]["message"] == "Edited Client: #1 Alice Tan (93334444)"
        shown = _json(cli_runner, ["client", "show", "1"])
        assert shown["data"]["entity"]["phone"] == "93334444"

    def test_edit_tags(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, [*CLIENT_ARGS, "--tag", "vip"])
        data = _json(cli_runner, ["client", "edit", "1", "--tag", "regular"])
        assert data["data"]["entity"]["tags"] == ["regular"]
        data = _json(cli_runner, ["client", "edit", "1", "--clear-tags"])
        assert data["data"]["entity"]["tags"] == []

    def test_no_fields(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, CLIENT_ARGS)
        result = cli_runner.invoke(cli, ["client", "edit", "1"])
        assert result.exit_code == 1
        assert "At least one field to edit must be provided." in result.output

    def test_same_values(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, CLIENT_ARGS)
        result = cli_runner.invoke(cli, ["client", "edit", "1", "--phone", "91112222"])
        assert result.exit_code == 1
        assert "The edit leaves every field as it was." in result.stderr

    def test_unknown_id(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["client", "edit", "5", "--phone", "93334444"])
        assert result.exit_code == 1
        assert "No client with ID 5" in result.output

    @pytest.mark.parametrize("bad_id", ["0", "-1", "abc", "²"])
    def test_bad_id(self, cli_runner: CliRunner, bad_id: str) -> None:
        result = cli_runner.invoke(cli, ["client", "edit", "--phone", "93334444", "--", bad_id])
        assert result.exit_code == 2
        assert "is not a valid ID" in result.output


@pytest.mark.usefixtures("_isolated_project")
class TestClientDeleteListFind:
    def _seed(self, runner: CliRunner) -> None:
        runner.invoke(cli, [*CLIENT_ARGS, "--tag", "vip"])
        args = [*CLIENT_ARGS]
        args[2:5] = ["Bob Lim", "--phone", "92223333"]
        runner.invoke(cli, args)

    def test_delete(self, cli_runner: CliRunner) -> None:
        self._seed(cli_runner)
        result = cli_runner.invoke(cli, ["client", "delete", "1"])
        assert result.exit_code == 0
        assert "Deleted Client: #1 Alice Tan" in result.output
        listed = _json(cli_runner, ["client", "list"])
        assert [c["name"] for c in listed["data"]["items"]] == ["Bob Lim"]

    def test_delete_unknown(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["client", "delete", "3"])
        assert result.exit_code == 1

    def test_list(self, cli_runner: CliRunner) -> None:
        self._seed(cli_runner)
        result = cli_runner.invoke(cli, ["client", "list"])
        assert result.exit_code == 0
        assert "Alice Tan" in result.output
        assert "Bob Lim" in result.output
        assert "2 clients listed!" in result.output

    def test_list_empty(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["client", "list"])
        assert "No clients to show." in result.output

    def test_find(self, cli_runner: CliRunner) -> None:
        self._seed(cli_runner)
        data = _json(cli_runner, ["client", "find", "bob"])
        assert [c["id"] for c in data["data"]["items"]] == [2]

    def test_find_by_tag(self, cli_runner: CliRunner) -> None:
        self._seed(cli_runner)
        data = _json(cli_runner, ["client", "find", "--tag", "vip"])
        assert data["data"]["count"] == 1

    def test_find_without_criteria(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["client", "find"])
        assert result.exit_code == 1
        assert "Provide at least one keyword or filter" in result.output

    def test_quiet_list_prints_ids(self, cli_runner: CliRunner) -> None:
        self._seed(cli_runner)
        result = cli_runner.invoke(cli, ["-q", "client", "list"])
        assert result.stdout.split() == ["1", "2"]

    def test_show_missing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["client", "show", "9"])
        assert result.exit_code == 1
        assert "No client with ID 9" in result.output

    def test_show_superscript_id_is_a_usage_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["client", "show", "²"])
        assert result.exit_code == 2
        assert "is not a valid ID" in result.output
