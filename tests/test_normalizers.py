from parsing.normalizers import (
    find_year_ranges,
    normalize_date_range,
    normalize_text,
    parse_year,
)


def test_line_breaks_and_whitespace():
    raw = "Jane   Doe\r\nData\tEngineer\r\n\r\n\r\n\r\nSkills"
    assert normalize_text(raw) == "Jane Doe\nData Engineer\n\nSkills"


def test_control_chars_and_cid_glyphs_removed():
    assert normalize_text("Py\u200bthon(cid:127) Dev\x07") == "Python Dev"


def test_bullets_quotes_and_dashes():
    raw = "\u2022 Built APIs\n\u25cf Led \u201cPayments\u201d team \u2013 2019"
    assert normalize_text(raw) == '- Built APIs\n- Led "Payments" team - 2019'


def test_mojibake_repaired():
    assert normalize_text("Rahul\u00e2\u20ac\u2122s resume") == "Rahul's resume"


def test_hyphenated_line_break_joined():
    assert normalize_text("software engi-\nneering") == "software engineering"


def test_normalize_is_idempotent():
    raw = "  Jane  Doe \r\n\u2022 Python\n\n\n\nEDUCATION  "
    once = normalize_text(raw)
    assert normalize_text(once) == once


def test_parse_year():
    assert parse_year("2019") == 2019
    assert parse_year("March 2019") == 2019
    assert parse_year("") is None


def test_year_ranges():
    assert find_year_ranges("Acme 2015 to 2017, Globex 2017 - Present") == [(2015, 2017), (2017, None)]
    assert find_year_ranges("Jan 2020 - Dec 2021") == [(2020, 2021)]
    assert find_year_ranges("no dates here") == []


def test_normalize_date_range():
    assert normalize_date_range("Jan 2020 - Present") == ("2020", "Present")
    assert normalize_date_range("2018 - 2019") == ("2018", "2019")
    assert normalize_date_range("joined recently") == (None, None)
