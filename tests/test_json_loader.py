from pathlib import Path

import pytest

from theater.models.failure import FailureKind, InvalidInputError
from theater.models.invoice import Performance
from theater.models.play import Play
from theater.parsers.json_loader import (
    load_invoices,
    load_plays,
    parse_invoices,
    parse_plays,
)


class TestParsePlays:
    def test_parse_catalog(self) -> None:
        catalog = parse_plays({"hamlet": {"name": "Hamlet", "type": "tragedy"}})
        assert catalog.resolve("hamlet") == Play(name="Hamlet", type="tragedy")

    def test_unknown_type_kept_as_written(self) -> None:
        """Genres are checked when priced, not when loaded."""
        catalog = parse_plays({"cats": {"name": "Cats", "type": "musical"}})
        assert catalog["cats"].type == "musical"

    def test_missing_name_rejected(self) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            parse_plays({"hamlet": {"type": "tragedy"}})
        assert exc_info.value.kind == FailureKind.INVALID_INPUT

    def test_non_mapping_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            parse_plays(["hamlet"])


class TestParseInvoices:
    def test_parse_invoice_list(self) -> None:
        invoices = parse_invoices(
            [
                {
                    "customer": "BigCo",
                    "performances": [
                        {"playID": "hamlet", "audience": 55},
                        {"play_id": "as-like", "audience": 35},
                    ],
                }
            ]
        )

        assert len(invoices) == 1
        assert invoices[0].customer == "BigCo"
        assert invoices[0].performances == (
            Performance(play_id="hamlet", audience=55),
            Performance(play_id="as-like", audience=35),
        )

    def test_single_invoice_object(self) -> None:
        invoices = parse_invoices({"customer": "BigCo", "performances": []})
        assert [i.customer for i in invoices] == ["BigCo"]

    def test_negative_audience_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            parse_invoices([{"customer": "BigCo", "performances": [{"playID": "x", "audience": -1}]}])

    @pytest.mark.parametrize("audience", ["55", True, 40.0])
    def test_non_integer_audience_rejected(self, audience: object) -> None:
        """Strings, booleans and floats are never coerced into seat counts."""
        data = [{"customer": "BigCo", "performances": [{"playID": "x", "audience": audience}]}]
        with pytest.raises(InvalidInputError):
            parse_invoices(data)

    def test_missing_play_id_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            parse_invoices([{"customer": "BigCo", "performances": [{"audience": 10}]}])


class TestLoadFiles:
    def test_load_plays(self, tmp_path: Path, sample_plays_json: str) -> None:
        path = tmp_path / "plays.json"
        path.write_text(sample_plays_json, encoding="utf-8")

        catalog = load_plays(path)

        assert len(catalog) == 3
        assert catalog.resolve("as-like").type == "comedy"

    def test_load_invoices(self, tmp_path: Path, sample_invoices_json: str) -> None:
        path = tmp_path / "invoices.json"
        path.write_text(sample_invoices_json, encoding="utf-8")

        invoices = load_invoices(path)

        assert len(invoices) == 1
        assert [p.play_id for p in invoices[0].performances] == ["hamlet", "as-like", "othello"]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_plays(tmp_path / "nope.json")

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "plays.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(InvalidInputError, match="Malformed JSON"):
            load_plays(path)

    def test_non_utf8_file(self, tmp_path: Path) -> None:
        path = tmp_path / "plays.json"
        path.write_bytes(b"\xff\xfe{}")

        with pytest.raises(InvalidInputError, match="not UTF-8"):
            load_plays(path)

    def test_directory_path(self, tmp_path: Path) -> None:
        with pytest.raises(InvalidInputError, match="Cannot read"):
            load_invoices(tmp_path)
