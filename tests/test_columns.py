"""Tests for table classification and header-driven column resolution."""

from sur_scraper.columns import (
    DEFAULT_COLUMNS,
    classify_tables,
    is_submission_table,
    resolve_columns,
    role_for_header,
)
from sur_scraper.parsing import parse_html


def test_resolve_columns_spec_headers():
    headers = ["drug name", "accepted", "therapeutic area", "sponsor", "submission class"]
    assert resolve_columns(headers) == {
        "ingredient": 0,
        "date": 1,
        "area": 2,
        "company": 3,
        "class": 4,
    }


def test_resolve_columns_reordered_headers():
    headers = [
        "Medicinal ingredient(s)",
        "Therapeutic area",
        "Company/sponsor name",
        "Submission class",
        "Year and month submission accepted",
    ]
    mapping = resolve_columns(headers)
    assert mapping == {"ingredient": 0, "area": 1, "company": 2, "class": 3, "date": 4}


def test_resolve_columns_unmatched_headers_keep_defaults():
    assert resolve_columns(["foo", "bar"]) == DEFAULT_COLUMNS
    assert resolve_columns([]) == DEFAULT_COLUMNS


def test_resolve_columns_last_match_wins():
    mapping = resolve_columns(["sponsor", "medicinal ingredient", "company"])
    assert mapping["company"] == 2
    assert mapping["ingredient"] == 1


def test_resolve_columns_does_not_mutate_defaults():
    resolve_columns(["area", "medicinal ingredient"])
    assert DEFAULT_COLUMNS == {"ingredient": 0, "date": 1, "area": 2, "company": 3, "class": 4}


def test_header_feeds_only_first_matching_role():
    # "accepted" wins over "submission"; class keeps its default
    assert role_for_header("Year and month submission accepted") == "date"
    mapping = resolve_columns(["x", "x", "x", "x", "x", "date submission accepted"])
    assert mapping["date"] == 5
    assert mapping["class"] == 4


def test_role_for_header_unknown():
    assert role_for_header("notes") is None


def test_is_submission_table():
    assert is_submission_table(["medicinal ingredient(s)", "company"])
    assert is_submission_table(["Drug Name"])
    assert not is_submission_table(["name", "date"])
    assert not is_submission_table([])


def test_classify_tables_in_document_order(load_html):
    doc = parse_html(load_html("sur_page.html"))
    matched = classify_tables(doc)

    assert len(matched) == 2
    first_table, first_mapping = matched[0]
    second_table, second_mapping = matched[1]
    assert "Submissions under review" in first_table.get_text()
    assert first_mapping["date"] == 4
    assert second_mapping == DEFAULT_COLUMNS


def test_classify_tables_mappings_are_independent(load_html):
    doc = parse_html(load_html("sur_page.html"))
    (_, first), (_, second) = classify_tables(doc)
    assert first is not second
    assert first["area"] == 1
    assert second["area"] == 2
