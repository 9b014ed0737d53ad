"""Tests for the typer CLI."""

from unittest.mock import patch

from typer.testing import CliRunner

from random_isbn.__main__ import cli
from random_isbn.models import CatalogRequestError, CodeWidthError, LookupResult, Publisher

runner = CliRunner()


@patch("random_isbn.__main__.run_lookup")
def test_find_prints_link(mock_run):
    mock_run.return_value = LookupResult(
        found=True,
        attempts=2,
        isbn13="9784101092058",
        isbn10="4101092052",
        publisher=Publisher(code="10", name="新潮社"),
        total_results=1,
        link="https://booklog.jp/item/1/4101092052",
    )

    result = runner.invoke(cli, ["find", "--attempts", "5", "--interval", "0"])

    assert result.exit_code == 0
    assert "https://booklog.jp/item/1/4101092052" in result.output
    _, kwargs = mock_run.call_args
    assert kwargs["max_attempts"] == 5
    assert kwargs["interval"] == 0


@patch("random_isbn.__main__.run_lookup")
def test_find_reports_failure(mock_run):
    mock_run.return_value = LookupResult(found=False, attempts=10)

    result = runner.invoke(cli, ["find"])

    assert result.exit_code == 1
    assert "cannot find any books in 10 times" in result.output


@patch("random_isbn.__main__.run_lookup")
def test_find_catalog_error(mock_run):
    mock_run.side_effect = CatalogRequestError("Catalog returned HTTP 503 for 9784101092058")

    result = runner.invoke(cli, ["find"])

    assert result.exit_code == 2


@patch("random_isbn.__main__.run_lookup")
def test_find_identifier_error_is_config_error(mock_run):
    """A malformed identifier prefix exits 2, not the "not found" code 1."""
    mock_run.side_effect = CodeWidthError("expected 12 digits before the check digit, got 11")

    result = runner.invoke(cli, ["find", "--attempts", "1"])

    assert result.exit_code == 2
    assert "expected 12 digits" in result.output


def test_find_rejects_zero_attempts():
    result = runner.invoke(cli, ["find", "--attempts", "0"])
    assert result.exit_code != 0


def test_generate_is_repeatable():
    first = runner.invoke(cli, ["generate", "--count", "3", "--seed", "11"])
    second = runner.invoke(cli, ["generate", "--count", "3", "--seed", "11"])

    assert first.exit_code == 0
    assert first.output == second.output
    lines = first.output.strip().splitlines()
    assert len(lines) == 3
    for line in lines:
        assert len(line.split()[0]) == 13
        assert len(line.split()[1]) == 10
        assert line.startswith("9784")


def test_generate_with_publisher():
    result = runner.invoke(cli, ["generate", "--publisher", "7981", "--seed", "3"])

    assert result.exit_code == 0
    assert result.output.startswith("9784798")
    assert "978-4-7981-" in result.output
    assert result.output.rstrip().endswith("翔泳社")


def test_generate_with_unlisted_publisher():
    """Codes outside the table still generate, without a name."""
    result = runner.invoke(cli, ["generate", "--publisher", "123", "--seed", "3"])

    assert result.exit_code == 0
    assert result.output.startswith("9784123")
    assert result.output.rstrip().endswith(")")


def test_generate_bad_publisher():
    result = runner.invoke(cli, ["generate", "--publisher", "12345678"])
    assert result.exit_code == 2


def test_publishers_lists_table(tmp_path):
    table = tmp_path / "pubs.csv"
    table.write_text("code,name\n7981,翔泳社\n10,新潮社\n", encoding="utf-8")

    result = runner.invoke(cli, ["publishers", "--publishers", str(table)])

    assert result.exit_code == 0
    assert result.output.splitlines() == ["4-7981\t翔泳社", "4-10\t新潮社"]
