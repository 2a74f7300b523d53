"""Functional tests for ``circulation items`` and ``circulation holds``.

A librarian adds an item, a patron places a hold on it and later checks it
out, all from the command line against a migrated SQLite file. Results are
JSON on stdout using the same keys as the HTTP API.
"""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from circulation.entrypoints.cli.helpers.app import MISSING_DB_URL_MSG
from circulation.entrypoints.cli.main import circulation as circulation_cli
from tests.fixtures.datagen import BARCODE, HOLD_ID, OTHER_PATRON_ID, PATRON_ID

# pylint: disable=redefined-outer-name
# pylint: disable=magic-value-comparison


@pytest.fixture
def runner(tmp_path: Path, sqlite_url_file: str) -> CliRunner:
    """Runner with CIRCULATION_DB_URL pointing at a migrated database."""
    return CliRunner(
        env={
            "CIRCULATION_DB_URL": sqlite_url_file,
            "CIRCULATION_LOG_PATH": str(tmp_path / "latest.log"),
        }
    )


def _json(result: Result) -> dict:
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout.strip().splitlines()[-1])


def _add_item(runner: CliRunner) -> dict:
    return _json(
        runner.invoke(
            circulation_cli, ["items", "add", BARCODE, "The Hobbit", "823.912 TOL"]
        )
    )


def test_librarian_and_patron_flow(runner):
    """An item goes from the shelf to the patron."""

    # The librarian adds a new copy of The Hobbit.
    item = _add_item(runner)
    assert item["barcode"] == BARCODE
    assert item["catalogNumber"] == "823.912 TOL"
    assert item["status"] == "AVAILABLE"

    # A patron places a hold on it.
    hold = _json(
        runner.invoke(
            circulation_cli,
            ["holds", "place", BARCODE, PATRON_ID, "--date", "2024-02-20"],
        )
    )
    assert hold["bookBarcode"] == BARCODE
    assert hold["patronId"] == PATRON_ID
    assert hold["dateOfHold"] == "2024-02-20"

    shown = _json(runner.invoke(circulation_cli, ["items", "show", BARCODE]))
    assert shown["status"] == "ON_HOLD"

    # A few days later they collect it.
    checkout = _json(
        runner.invoke(
            circulation_cli,
            ["holds", "checkout", hold["id"], PATRON_ID, "--date", "2024-02-23"],
        )
    )
    assert checkout == {
        "holdId": hold["id"],
        "patronId": PATRON_ID,
        "dateOfCheckout": "2024-02-23",
    }

    shown = _json(runner.invoke(circulation_cli, ["items", "show", BARCODE]))
    assert shown["status"] == "ISSUED"


def test_hold_defaults_to_today(runner):
    """Without --date the hold is dated today."""
    _add_item(runner)
    hold = _json(runner.invoke(circulation_cli, ["holds", "place", BARCODE, PATRON_ID]))
    assert hold["dateOfHold"]


def test_rejections_are_one_line_errors(runner):
    """Domain failures exit with status 1 and a message, not a traceback."""
    _add_item(runner)
    hold = _json(runner.invoke(circulation_cli, ["holds", "place", BARCODE, PATRON_ID]))

    # The item is already on hold.
    result = runner.invoke(
        circulation_cli, ["holds", "place", BARCODE, OTHER_PATRON_ID]
    )
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "Traceback" not in result.output

    # Someone else tries to collect it.
    result = runner.invoke(
        circulation_cli, ["holds", "checkout", hold["id"], OTHER_PATRON_ID]
    )
    assert result.exit_code == 1
    assert "Hold does not belong to the specified patron" in result.output

    # The hold ID is wrong.
    result = runner.invoke(circulation_cli, ["holds", "checkout", HOLD_ID, PATRON_ID])
    assert result.exit_code == 1

    # The barcode is already used.
    result = runner.invoke(circulation_cli, ["items", "add", BARCODE, "Again", "000"])
    assert result.exit_code == 1
    assert BARCODE in result.output


def test_unknown_item(runner):
    """Showing a barcode nobody added fails."""
    result = runner.invoke(circulation_cli, ["items", "show", "00000000"])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_patron_id_must_be_a_uuid(runner):
    """Click rejects malformed patron IDs before any command runs."""
    result = runner.invoke(circulation_cli, ["holds", "place", BARCODE, "bob"])
    assert result.exit_code == 2
    assert "UUID" in result.output


def test_missing_db_url(tmp_path):
    """Commands that touch the catalog explain how to set the URL."""
    runner = CliRunner(
        env={
            "CIRCULATION_DB_URL": "",
            "CIRCULATION_LOG_PATH": str(tmp_path / "latest.log"),
        }
    )
    result = runner.invoke(circulation_cli, ["items", "show", BARCODE])
    assert result.exit_code == 1
    assert MISSING_DB_URL_MSG in result.output
