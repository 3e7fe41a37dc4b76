"""Tests for CSV import command."""

from rentledger.cli.main import cli


def test_import_successful(cli_runner, fixtures_dir):
    """Test successful CSV import."""
    csv_file = fixtures_dir / "rental_export.csv"

    result = cli_runner.invoke(cli, ["import", str(csv_file)])

    assert result.exit_code == 0
    assert "Import complete" in result.output
    assert "Parsed: 2 transactions" in result.output
    assert "Skipped: 0 rows" in result.output
    assert "Rp 540,000.00" in result.output
    assert "Rp -150,000.00" in result.output


def test_import_verbose_shows_reference(cli_runner, fixtures_dir):
    csv_file = fixtures_dir / "bank_mutasi.csv"

    result = cli_runner.invoke(cli, ["import", str(csv_file), "--verbose"])

    assert result.exit_code == 0
    assert "INV-1001" in result.output
    assert "Bank" in result.output


def test_import_reports_skipped_rows(cli_runner, fixtures_dir):
    csv_file = fixtures_dir / "malformed_rows.csv"

    result = cli_runner.invoke(cli, ["import", str(csv_file)])

    assert result.exit_code == 0
    assert "Parsed: 1 transactions" in result.output
    assert "Skipped: 1 rows" in result.output
    assert "Row 2:" in result.output


def test_import_header_only_fails(cli_runner, fixtures_dir):
    csv_file = fixtures_dir / "header_only.csv"

    result = cli_runner.invoke(cli, ["import", str(csv_file)])

    assert result.exit_code == 1
    assert "no data rows" in result.output.lower()


def test_import_nothing_parsed_fails(cli_runner, fixtures_dir):
    csv_file = fixtures_dir / "no_values.csv"

    result = cli_runner.invoke(cli, ["import", str(csv_file)])

    assert result.exit_code == 1
    assert "could not parse any transactions" in result.output.lower()


def test_import_invalid_file(cli_runner):
    """Test import with non-existent file."""
    result = cli_runner.invoke(cli, ["import", "/nonexistent/file.csv"])

    # Click returns exit code 2 for a missing path argument
    assert result.exit_code != 0
    assert "does not exist" in result.output.lower()


def test_import_dot_policy_option(cli_runner, tmp_path):
    csv_path = tmp_path / "decimal.csv"
    csv_path.write_text("date,description,amount\n2023-10-01,Rental,10.5\n", encoding="utf-8")

    result = cli_runner.invoke(cli, ["--dot-policy", "decimal", "import", str(csv_path)])

    assert result.exit_code == 0
    assert "Rp 10.50" in result.output


def test_import_dot_policy_from_environment(cli_runner, tmp_path):
    csv_path = tmp_path / "decimal.csv"
    csv_path.write_text("date,description,amount\n2023-10-01,Rental,10.5\n", encoding="utf-8")

    result = cli_runner.invoke(
        cli, ["import", str(csv_path)], env={"RENTLEDGER_DOT_POLICY": "decimal"}
    )

    assert result.exit_code == 0
    assert "Rp 10.50" in result.output
