import pytest

from projects_csv.normalize import (
    COLUMN_COERCIONS,
    Coercion,
    clean_header,
    normalize_rows,
    parse_or_default,
    parse_projects_from_csv,
    to_budget,
    to_identifier,
    to_int,
)


def test_normalizes_types_and_drops_missing_ids():
    csv_text = 'id,name,startMonth,budget\n,NoId,0,0\n10,Parsed,4,"1,234"'
    projects = parse_projects_from_csv(csv_text)
    assert len(projects) == 1
    p = projects[0]
    assert p.id == "10"
    assert p.name == "Parsed"
    assert p.start_month == 4
    assert p.budget == 1234

@pytest.mark.parametrize("text", ["", "id,name,startMonth,budget", "id,name\n"])
def test_empty_or_header_only_yields_nothing(text):
    assert parse_projects_from_csv(text) == []

def test_normalize_rows_empty():
    assert normalize_rows([]) == []

def test_preserves_input_order():
    csv_text = "id,name\n3,C\n1,A\n,skip\n2,B"
    assert [p.id for p in parse_projects_from_csv(csv_text)] == ["3", "1", "2"]

def test_short_row_leaves_columns_absent():
    [p] = parse_projects_from_csv("id,name,startMonth,budget,status\n7,X")
    assert p.name == "X"
    assert p.start_month == 0
    assert p.budget == 0
    assert p.status is None

def test_long_row_extra_values_ignored():
    [p] = parse_projects_from_csv("id,name\n1,A,surplus")
    assert p.name == "A"
    assert p.extra == {}

def test_duplicate_header_last_column_wins():
    [p] = parse_projects_from_csv("id,name,name\n1,First,Second")
    assert p.name == "Second"

def test_missing_id_column_drops_everything():
    assert parse_projects_from_csv("name,budget\nA,10\nB,20") == []

def test_blank_lines_are_dropped():
    projects = parse_projects_from_csv("id,name\n1,A\n\n2,B\n")
    assert [p.id for p in projects] == ["1", "2"]

def test_bom_is_stripped():
    [p] = parse_projects_from_csv("\ufeffid,name\n1,A")
    assert p.id == "1"
    [q] = normalize_rows([["\ufeffid", "name"], ["2", "B"]])
    assert q.id == "2"

def test_meeting_dates_optional():
    csv_text = "id,meetingStartDate,meetingEndDate\n1,,\n2,2025-11-03,2025-11-05"
    first, second = parse_projects_from_csv(csv_text)
    assert first.meeting_start_date is None
    assert first.meeting_end_date is None
    assert second.meeting_start_date == "2025-11-03"
    assert second.meeting_end_date == "2025-11-05"

def test_status_passes_through_unvalidated():
    [p] = parse_projects_from_csv("id,status\n1,on hold")
    assert p.status == "on hold"

def test_unknown_columns_go_to_extra():
    projects = parse_projects_from_csv("id,owner,notes\n1,Somchai\n2,Nok,\"a, b\"")
    assert projects[0].extra == {"owner": "Somchai", "notes": None}
    assert projects[1].extra == {"owner": "Nok", "notes": "a, b"}
    assert projects[1].value_for("notes") == "a, b"

def test_to_row_uses_column_names():
    [p] = parse_projects_from_csv("id,startMonth,owner\n1,2,Nok")
    row = p.to_row()
    assert row["startMonth"] == 2
    assert row["owner"] == "Nok"
    assert "start_month" not in row

def test_clean_header():
    assert clean_header("\ufeff id ") == "id"
    assert clean_header(None) == ""

@pytest.mark.parametrize(
    "value,expected",
    [
        ("4", 4),
        (" 11 ", 11),
        ("-2", -2),
        ("4.7", 4),
        ("1e2", 100),
        ("", 0),
        (None, 0),
        ("abc", 0),
        ("1-2", 0),
        ("nan", 0),
        ("inf", 0),
        ("1e400", 0),
        ("๔", 0),
        ("４", 0),
    ],
)
def test_to_int(value, expected):
    assert to_int(value) == expected

def test_non_ascii_digits_agree_across_integer_columns():
    [p] = parse_projects_from_csv("id,startMonth,budget\n1,๔,๔")
    assert p.start_month == 0
    assert p.budget == 0

@pytest.mark.parametrize(
    "value,expected",
    [
        ("1,234", 1234),
        ("฿2,500.50", 2500),
        ("1 000 000", 1000000),
        ("-", 0),
        ("", 0),
        (None, 0),
    ],
)
def test_to_budget(value, expected):
    assert to_budget(value) == expected

def test_parse_or_default_only_swallows_parse_errors():
    def parser(value):
        if value == "bad":
            raise ValueError(value)
        if value == "boom":
            raise RuntimeError(value)
        return value.upper()

    parse = parse_or_default(parser, "fallback")
    assert parse("ok") == "OK"
    assert parse("bad") == "fallback"
    with pytest.raises(RuntimeError):
        parse("boom")

def test_absent_id_is_empty_string():
    assert to_identifier(None) == ""
    assert to_identifier("p17") == "p17"

def test_coercion_table():
    assert COLUMN_COERCIONS["startMonth"] is Coercion.INTEGER
    assert COLUMN_COERCIONS["budget"] is Coercion.INTEGER
    assert COLUMN_COERCIONS["meetingStartDate"] is Coercion.OPTIONAL_STRING
    assert COLUMN_COERCIONS["id"] is Coercion.IDENTIFIER
    assert "name" not in COLUMN_COERCIONS
