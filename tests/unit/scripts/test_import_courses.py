"""Tests for scripts.import_courses module."""

from unittest.mock import patch

from course_rankings.diagnostics import CheckResult, DiagnosticsReport
from course_rankings.importer import ImportResult
from course_rankings.store import StoreError
from course_rankings.table_check import TableInfo
from scripts.import_courses import main, run_import, show_diagnostics, show_table


def test_run_import_success(mock_env_vars, capsys):
    """Test run_import() prints the row count and exits 0."""
    result = ImportResult(success=True, message="Data imported successfully!", count=42)
    with patch("scripts.import_courses.make_store"):
        with patch("scripts.import_courses.import_courses", return_value=result) as mock_import:
            assert run_import("https://example.com/other.csv") == 0

    assert mock_import.call_args.kwargs["csv_url"] == "https://example.com/other.csv"
    assert "Imported 42 rows" in capsys.readouterr().out


def test_run_import_failure(mock_env_vars, capsys):
    """Test run_import() prints the failure details and exits 1."""
    result = ImportResult(False, "Failed to import data", details="Error inserting batch 2: boom")
    with patch("scripts.import_courses.make_store"):
        with patch("scripts.import_courses.import_courses", return_value=result):
            assert run_import() == 1

    out = capsys.readouterr().out
    assert "Failed to import data" in out
    assert "Error inserting batch 2: boom" in out


def test_show_table(mock_env_vars, capsys):
    info = TableInfo(
        exists=True,
        row_count=1,
        sample_data=[{"id": "c001", "club_name": "Merion"}],
        schema=[{"column": "club_name", "dataType": "string"}],
    )
    with patch("scripts.import_courses.make_store"):
        with patch("scripts.import_courses.inspect_table", return_value=info):
            assert show_table() == 0

    out = capsys.readouterr().out
    assert "Row count:  1" in out
    assert "club_name" in out
    assert "Merion" in out


def test_show_table_empty(mock_env_vars, capsys):
    with patch("scripts.import_courses.make_store"):
        with patch("scripts.import_courses.inspect_table", return_value=TableInfo(exists=True, sample_data=[])):
            assert show_table() == 0
    assert "contains no data" in capsys.readouterr().out


def test_show_table_error(mock_env_vars, capsys):
    with patch("scripts.import_courses.make_store"):
        with patch(
            "scripts.import_courses.inspect_table",
            side_effect=StoreError("Error getting row count: permission denied"),
        ):
            assert show_table() == 1
    assert "permission denied" in capsys.readouterr().out


def test_show_diagnostics_exit_code(mock_env_vars):
    """Test show_diagnostics() exits 1 when any check failed."""
    ok = CheckResult(True, "ok")
    failed = CheckResult(False, "The 'golf_courses' table does not exist", error={"code": "42P01"})
    good = DiagnosticsReport({"SUPABASE_URL": True}, True, ok, ok, ok)
    bad = DiagnosticsReport({"SUPABASE_URL": True}, True, ok, failed, failed)

    with patch("scripts.import_courses.run_diagnostics", return_value=good):
        assert show_diagnostics() == 0
    with patch("scripts.import_courses.run_diagnostics", return_value=bad) as mock_run:
        assert show_diagnostics() == 1
    assert mock_run.call_args.kwargs["table"] == "golf_courses"


def test_main_dispatch():
    """Test main() routes subcommands to their handlers."""
    with patch("scripts.import_courses.run_import", return_value=0) as mock_import:
        assert main(["import", "--csv-url", "https://example.com/x.csv"]) == 0
    mock_import.assert_called_once_with("https://example.com/x.csv")

    with patch("scripts.import_courses.show_table", return_value=0) as mock_check:
        main(["check"])
    mock_check.assert_called_once_with()

    with patch("scripts.import_courses.show_diagnostics", return_value=1) as mock_diag:
        assert main(["diagnose"]) == 1
    mock_diag.assert_called_once_with()


def test_main_no_command_prints_help(capsys):
    assert main([]) == 2
    assert "usage" in capsys.readouterr().out.lower()


def test_run_import_missing_config(mock_env_vars, monkeypatch, capsys):
    """Test run_import() prints a config error and exits 1 when SUPABASE_URL is unset."""
    monkeypatch.delenv("SUPABASE_URL")
    with patch("scripts.import_courses.import_courses") as mock_import:
        assert run_import() == 1
    mock_import.assert_not_called()
    assert "Configuration error: Missing required env var: SUPABASE_URL" in capsys.readouterr().out


def test_show_table_missing_config(mock_env_vars, monkeypatch, capsys):
    monkeypatch.delenv("SUPABASE_ANON_KEY")
    assert show_table() == 1
    assert "Missing required env var: SUPABASE_ANON_KEY" in capsys.readouterr().out
