import pytest

from defect_init.errors import MissingRequiredField
from defect_init.extractors.spreadsheet import (
    FieldExtractor,
    extract_fields,
    merge_header_aliases,
    require_title,
    sanitize_markup,
)
from defect_init.ir import CanonicalField, RawRow


def test_item_id_becomes_prefixed_title(defect_rows):
    mapping = extract_fields(RawRow.from_rows(defect_rows))
    assert mapping[CanonicalField.TITLE] == "Defect 7883"
    assert require_title(mapping) == "Defect 7883"


def test_all_recognised_headers_are_mapped():
    raw = RawRow(cells=[
        ("Item ID", "12"),
        ("Summary", "s"),
        ("Description", "d"),
        ("Comments (Click Add Comment before commenting)", "c"),
        ("Creation Date", "2024-01-05"),
        ("Detected in Release", "v2.1"),
        ("Environment", "prod"),
        ("Creator Full Name", "Ada Lovelace"),
        ("Customer Desired Release", "v3.0"),
    ])
    mapping = extract_fields(raw)
    assert mapping == {
        CanonicalField.TITLE: "Defect 12",
        CanonicalField.SUMMARY: "s",
        CanonicalField.DESCRIPTION: "d",
        CanonicalField.COMMENTS: "c",
        CanonicalField.CREATION_DATE: "2024-01-05",
        CanonicalField.DETECTED_IN_RELEASE: "v2.1",
        CanonicalField.ENVIRONMENT: "prod",
        CanonicalField.CREATOR_FULL_NAME: "Ada Lovelace",
        CanonicalField.CUSTOMER_DESIRED_RELEASE: "v3.0",
    }


def test_column_order_does_not_matter(defect_rows):
    headers, values = defect_rows
    reversed_rows = [list(reversed(headers)), list(reversed(values))]
    assert extract_fields(RawRow.from_rows(reversed_rows)) == extract_fields(RawRow.from_rows(defect_rows))


def test_unknown_headers_are_ignored():
    raw = RawRow(cells=[("Item ID", "1"), ("Priority", "High"), ("summary", "lower-case header")])
    mapping = extract_fields(raw)
    assert list(mapping) == [CanonicalField.TITLE]


def test_absent_fields_are_omitted_not_empty():
    mapping = extract_fields(RawRow(cells=[("Item ID", "1"), ("Environment", "")]))
    assert CanonicalField.SUMMARY not in mapping
    assert mapping[CanonicalField.ENVIRONMENT] == ""


def test_description_and_comments_are_sanitised():
    raw = RawRow(cells=[
        ("Item ID", "1"),
        ("Description", "<b>bold</b> text"),
        ("Comments (Click Add Comment before commenting)", "a <> b"),
        ("Summary", "<kept>"),
    ])
    mapping = extract_fields(raw)
    assert mapping[CanonicalField.DESCRIPTION] == "`b`bold`/b` text"
    assert mapping[CanonicalField.COMMENTS] == "a `` b"
    # Only the free-text fields are sanitised.
    assert mapping[CanonicalField.SUMMARY] == "<kept>"


@pytest.mark.parametrize("text", ["", "plain", "<<>>", "x<y>z\n<tag attr='1'>"])
def test_sanitize_markup_replaces_one_for_one(text):
    cleaned = sanitize_markup(text)
    assert "<" not in cleaned and ">" not in cleaned
    assert len(cleaned) == len(text)
    assert cleaned.count("`") == text.count("<") + text.count(">") + text.count("`")


def test_missing_item_id_raises():
    raw = RawRow(cells=[("Summary", "no id here")])
    mapping = extract_fields(raw)
    with pytest.raises(MissingRequiredField) as excinfo:
        require_title(mapping, raw)
    assert excinfo.value.details["headers"] == ["Summary"]


def test_zero_columns_has_no_title():
    assert extract_fields(RawRow.from_rows([])) == {}
    with pytest.raises(MissingRequiredField):
        require_title({})


def test_duplicate_header_keeps_first_value():
    raw = RawRow(cells=[("Item ID", "1"), ("Summary", "first"), ("Summary", "second")])
    assert extract_fields(raw)[CanonicalField.SUMMARY] == "first"


def test_extra_aliases_extend_builtin_table():
    extractor = FieldExtractor(header_aliases={CanonicalField.SUMMARY: ["Short Description"]})
    raw = RawRow(cells=[("Item ID", "5"), ("Short Description", "alias works")])
    assert extractor.extract(raw)[CanonicalField.SUMMARY] == "alias works"
    assert extractor.match_header("Summary") is CanonicalField.SUMMARY


def test_merge_header_aliases_does_not_duplicate():
    merged = merge_header_aliases({CanonicalField.SUMMARY: ["Summary", "Headline"]})
    assert merged[CanonicalField.SUMMARY] == ("Summary", "Headline")


def test_custom_title_prefix():
    raw = RawRow(cells=[("Item ID", "42")])
    assert FieldExtractor(title_prefix="Bug ").extract(raw)[CanonicalField.TITLE] == "Bug 42"


def test_raw_row_pads_short_data_row_and_ignores_extra_rows():
    raw = RawRow.from_rows([["Item ID", "Summary"], ["9"], ["10", "ignored"]])
    assert raw.cells == [("Item ID", "9"), ("Summary", "")]


@pytest.mark.parametrize("item_id", ["", "   "])
def test_blank_item_id_is_not_a_title(item_id):
    raw = RawRow(cells=[("Item ID", item_id), ("Summary", "s")])
    mapping = extract_fields(raw)
    assert CanonicalField.TITLE not in mapping
    assert mapping[CanonicalField.SUMMARY] == "s"
    with pytest.raises(MissingRequiredField):
        require_title(mapping, raw)


def test_header_match_is_exact():
    raw = RawRow(cells=[(" Item ID ", "7"), ("Summary  ", "s")])
    assert extract_fields(raw) == {}
