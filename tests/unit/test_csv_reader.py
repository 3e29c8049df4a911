"""Tests for CSV parsing and view building."""

import csv

import pytest

from services.csv_reader import build_view, read_csv_rows


@pytest.fixture
def sample_csv(tmp_path):
    path = tmp_path / "people.csv"
    lines = ["name,age"] + [f"person{i},{20 + i}" for i in range(15)]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_read_rows(sample_csv):
    rows = read_csv_rows(sample_csv)

    assert rows[0] == ["name", "age"]
    assert rows[1] == ["person0", "20"]
    assert len(rows) == 16


def test_quoted_fields(tmp_path):
    path = tmp_path / "quoted.csv"
    path.write_text('a,b\n"x, y","line\nbreak"\n', encoding="utf-8")

    assert read_csv_rows(path) == [["a", "b"], ["x, y", "line\nbreak"]]


def test_inconsistent_field_count_raises(tmp_path):
    path = tmp_path / "ragged.csv"
    path.write_text("a,b\n1,2,3\n", encoding="utf-8")

    with pytest.raises(csv.Error):
        read_csv_rows(path)


def test_empty_file_has_no_rows(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")

    assert read_csv_rows(path) == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_csv_rows(tmp_path / "missing.csv")


def test_full_view(sample_csv):
    rows = read_csv_rows(sample_csv)

    view = build_view(sample_csv, rows)

    assert view.file_name == "people.csv"
    assert view.headers == ["name", "age"]
    assert view.total_rows == 15
    assert view.total_columns == 2
    assert len(view.rows) == 15
    assert view.preview_rows == rows


def test_preview_view(sample_csv):
    rows = read_csv_rows(sample_csv)

    view = build_view(sample_csv, rows, preview=True, preview_rows=10)

    assert len(view.preview_rows) == 11
    assert view.preview_rows[0] == ["name", "age"]
    assert view.preview_rows[-1] == ["person9", "29"]
    assert view.total_rows == 15


def test_preview_shorter_than_limit(tmp_path):
    path = tmp_path / "short.csv"
    path.write_text("h\n1\n", encoding="utf-8")

    view = build_view(path, read_csv_rows(path), preview=True, preview_rows=10)

    assert view.preview_rows == [["h"], ["1"]]


def test_view_of_empty_rows_raises(tmp_path):
    with pytest.raises(ValueError):
        build_view(tmp_path / "empty.csv", [])


def test_blank_line_between_records_is_skipped(tmp_path):
    path = tmp_path / "gap.csv"
    path.write_text("a,b\n1,2\n\n3,4\n", encoding="utf-8")

    assert read_csv_rows(path) == [["a", "b"], ["1", "2"], ["3", "4"]]


def test_trailing_blank_lines_are_skipped(tmp_path):
    path = tmp_path / "trailing.csv"
    path.write_text("a,b\n1,2\n\n\n", encoding="utf-8")

    assert read_csv_rows(path) == [["a", "b"], ["1", "2"]]


def test_only_blank_lines_is_empty(tmp_path):
    path = tmp_path / "blank.csv"
    path.write_text("\n\n", encoding="utf-8")

    assert read_csv_rows(path) == []
