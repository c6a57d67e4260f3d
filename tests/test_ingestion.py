"""Tests for staging dataset ingestion."""

import json
from pathlib import Path

import pytest

from pancheck.batch import process_batch
from pancheck.config import InputConfig, PipelineConfig
from pancheck.ingestion import PanRecordLoader, load_raw_records


def _config(path: Path, column: str = "pan_number") -> PipelineConfig:
    """Build a config for a staging file."""
    return PipelineConfig(
        project="test",
        input=InputConfig(data_root=path.parent, path=Path(path.name), column=column),
    )


class TestPanRecordLoader:
    """Tests for PanRecordLoader."""

    def test_load_csv(self, pipeline_config: PipelineConfig) -> None:
        """Raw values keep padding and case; empty lines become None."""
        records = PanRecordLoader(pipeline_config).load_raw_records()
        assert records == [
            "  abcde1234f  ",
            "ABCDE1234F",
            None,
            "   ",
            "AABCE1923F",
            "AXBCE1923F",
            "axbce1923f",
        ]

    def test_load_csv_custom_column(self, tmp_path: Path) -> None:
        """Test renaming of the configured source column."""
        path = tmp_path / "pans.csv"
        path.write_text("id,PAN\n1,AXBCE1923F\n2,\n", encoding="utf-8")
        records = load_raw_records(_config(path, column="PAN"))
        assert records == ["AXBCE1923F", None]

    def test_csv_keeps_na_string(self, tmp_path: Path) -> None:
        """Literal NA text is a value, not a missing marker."""
        path = tmp_path / "pans.csv"
        path.write_text("pan_number\nNA\n", encoding="utf-8")
        assert load_raw_records(_config(path)) == ["NA"]

    def test_load_json(self, tmp_path: Path) -> None:
        """Test JSON records with null values."""
        path = tmp_path / "pans.json"
        path.write_text(
            json.dumps([{"pan_number": " axbce1923f"}, {"pan_number": None}]),
            encoding="utf-8",
        )
        assert load_raw_records(_config(path)) == [" axbce1923f", None]

    def test_load_txt(self, tmp_path: Path) -> None:
        """Plain text files hold one value per line."""
        path = tmp_path / "pans.txt"
        path.write_text("AXBCE1923F\n\n  abcde1234f \n", encoding="utf-8")
        records = load_raw_records(_config(path))
        assert records == ["AXBCE1923F", None, "  abcde1234f "]

    def test_txt_byte_order_mark_removed(self, tmp_path: Path) -> None:
        """A leading BOM does not stick to the first value."""
        path = tmp_path / "pans.txt"
        path.write_text("AXBCE1923F\nAXBCE1923F\n", encoding="utf-8-sig")
        records = load_raw_records(_config(path))
        assert records == ["AXBCE1923F", "AXBCE1923F"]

    def test_txt_byte_order_mark_batch(self, tmp_path: Path) -> None:
        """Identical rows collapse even when the file starts with a BOM."""
        path = tmp_path / "pans.txt"
        path.write_text("AXBCE1923F\nAXBCE1923F\n", encoding="utf-8-sig")
        summary = process_batch(load_raw_records(_config(path))).summary
        assert summary.total_valid_pans == 1
        assert summary.total_invalid_pans == 0
        assert summary.total_missing_pans == 1

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="PAN dataset not found"):
            load_raw_records(_config(tmp_path / "absent.csv"))

    def test_unsupported_format(self, tmp_path: Path) -> None:
        """Test that unknown suffixes raise ValueError."""
        path = tmp_path / "pans.xml"
        path.write_text("<pans/>", encoding="utf-8")
        with pytest.raises(ValueError, match="Unsupported file format"):
            load_raw_records(_config(path))

    def test_missing_column(self, tmp_path: Path) -> None:
        """Test that a missing source column raises ValueError."""
        path = tmp_path / "pans.csv"
        path.write_text("other\nAXBCE1923F\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Column 'pan_number' not found"):
            load_raw_records(_config(path))
