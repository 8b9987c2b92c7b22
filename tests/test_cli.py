"""Tests for the stop-catalog command line interface."""

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from stop_catalog.cli import build_parser, main
from stop_catalog.domain.exceptions import CouldNotSaveStopError, SaveFailureReason


@pytest.fixture
def database_url(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> str:
    """Point the CLI at a temporary SQLite database."""
    url = f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    monkeypatch.chdir(tmp_path)
    return url


class TestBuildParser:
    """Tests for argument parsing."""

    def test_when_associate_given_then_parses_both_ids(self) -> None:
        """Given associate with two ids, when parsing, then both are captured."""
        args = build_parser().parse_args(["associate", "HSL:1040601", "HSL:1009:0:01"])

        assert args.command == "associate"
        assert args.stop_id == "HSL:1040601"
        assert args.route_pattern_id == "HSL:1009:0:01"

    def test_when_list_with_ids_then_parses_id_list(self) -> None:
        """Given list --ids, when parsing, then all ids are collected."""
        args = build_parser().parse_args(["--log-level", "debug", "list", "--ids", "a", "b"])

        assert args.ids == ["a", "b"]
        assert args.log_level == "debug"

    def test_when_list_without_ids_then_ids_is_none(self) -> None:
        """Given plain list, when parsing, then ids is None."""
        assert build_parser().parse_args(["list"]).ids is None


class TestMain:
    """Tests for command execution."""

    def test_when_no_command_then_returns_error_status(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Given no command, when running, then help is printed and status is 1."""
        assert main([]) == 1
        assert "stop-catalog" in capsys.readouterr().out

    def test_when_stop_missing_then_prints_error(
        self, database_url: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Given an empty database, when getting a stop, then the error goes to stderr."""
        assert main(["init-db"]) == 0

        assert main(["get", "HSL:404"]) == 1
        assert "No stop found with ID 'HSL:404'" in capsys.readouterr().err

    def test_when_database_empty_then_list_prints_empty_array(
        self, database_url: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Given an initialized empty database, when listing, then prints []."""
        assert main(["init-db"]) == 0
        capsys.readouterr()

        assert main(["list"]) == 0
        assert json.loads(capsys.readouterr().out) == []

    def test_when_route_pattern_has_no_stops_then_stops_of_prints_empty_array(
        self, database_url: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Given no route pattern rows, when listing its stops, then prints []."""
        assert main(["init-db"]) == 0
        capsys.readouterr()

        assert main(["stops-of", "HSL:1009:0:01"]) == 0
        assert json.loads(capsys.readouterr().out) == []

    def test_when_create_fails_then_returns_error_status(
        self, database_url: str, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Given the repository cannot save, when creating, then status is 1."""
        error = CouldNotSaveStopError(
            "Could not save stop with ID 'HSL:1'. Reason: timeout",
            reason=SaveFailureReason.UPSTREAM_FETCH_FAILED,
            stop_id="HSL:1",
        )

        with patch("stop_catalog.cli.run", new=AsyncMock(side_effect=error)):
            assert main(["create", "HSL:1"]) == 1

        assert "Could not save stop with ID 'HSL:1'" in capsys.readouterr().err
