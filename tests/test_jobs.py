"""Tests for the statement printing job."""

import json
from pathlib import Path

import pytest

from theater.jobs.print_statements import main, run_print_statements


@pytest.fixture
def input_files(
    tmp_path: Path, sample_plays_json: str, sample_invoices_json: str
) -> tuple[Path, Path]:
    plays_path = tmp_path / "plays.json"
    invoices_path = tmp_path / "invoices.json"
    plays_path.write_text(sample_plays_json, encoding="utf-8")
    invoices_path.write_text(sample_invoices_json, encoding="utf-8")
    return plays_path, invoices_path


class TestRunPrintStatements:
    def test_renders_each_invoice(self, input_files: tuple[Path, Path]) -> None:
        statements = run_print_statements(*input_files)

        assert len(statements) == 1
        assert statements[0] == (
            "Statement for BigCo\n"
            "  Hamlet: $650.00 (55 seats)\n"
            "  As You Like It: $580.00 (35 seats)\n"
            "  Othello: $500.00 (40 seats)\n"
            "Amount owed is $1,730.00\n"
            "You earned 47 credits\n"
        )


class TestMain:
    def test_prints_statements(
        self,
        input_files: tuple[Path, Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        plays_path, invoices_path = input_files

        code = main(["--plays", str(plays_path), "--invoices", str(invoices_path)])

        assert code == 0
        out = capsys.readouterr().out
        assert out.startswith("Statement for BigCo\n")
        assert "Amount owed is $1,730.00\n" in out

    def test_unknown_genre_exits_non_zero(
        self,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        plays_path = tmp_path / "plays.json"
        invoices_path = tmp_path / "invoices.json"
        plays_path.write_text(json.dumps({"cats": {"name": "Cats", "type": "musical"}}))
        invoices_path.write_text(
            json.dumps([{"customer": "BigCo", "performances": [{"playID": "cats", "audience": 5}]}])
        )

        code = main(["--plays", str(plays_path), "--invoices", str(invoices_path)])

        assert code == 1
        assert capsys.readouterr().out == ""

    def test_missing_play_exits_non_zero(
        self,
        tmp_path: Path,
        sample_plays_json: str,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        plays_path = tmp_path / "plays.json"
        invoices_path = tmp_path / "invoices.json"
        plays_path.write_text(sample_plays_json)
        invoices_path.write_text(
            json.dumps([{"customer": "BigCo", "performances": [{"playID": "macbeth", "audience": 5}]}])
        )

        assert main(["--plays", str(plays_path), "--invoices", str(invoices_path)]) == 1
        assert capsys.readouterr().out == ""

    def test_non_utf8_input_exits_non_zero(
        self,
        tmp_path: Path,
        sample_invoices_json: str,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        plays_path = tmp_path / "plays.json"
        invoices_path = tmp_path / "invoices.json"
        plays_path.write_bytes(b"\xff")
        invoices_path.write_text(sample_invoices_json)

        assert main(["--plays", str(plays_path), "--invoices", str(invoices_path)]) == 1
        assert capsys.readouterr().out == ""

    def test_directory_input_exits_non_zero(
        self,
        tmp_path: Path,
        sample_invoices_json: str,
    ) -> None:
        invoices_path = tmp_path / "invoices.json"
        invoices_path.write_text(sample_invoices_json)

        assert main(["--plays", str(tmp_path), "--invoices", str(invoices_path)]) == 1

    def test_missing_file_exits_non_zero(self, tmp_path: Path) -> None:
        code = main(["--plays", str(tmp_path / "a.json"), "--invoices", str(tmp_path / "b.json")])
        assert code == 1
