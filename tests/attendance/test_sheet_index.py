import pytest

from school_portal.attendance.model import NotFound, StudentMatch
from school_portal.attendance.sheet_index import SheetRowIndex, match_in_grid
from school_portal.core.exceptions import RemoteFetchError
from school_portal.sheets.model import SheetsConfig

HEADER = ["Roll", "Name", "X", "Section", "2024-01-01"]
CONFIG = SheetsConfig(spreadsheet_id="sid", class_sheets=("Class1", "Class2", "Class3"))


def test_stops_at_first_sheet_with_the_roll_number(fake_sheets):
    sheets = fake_sheets(
        {
            "Class1!A1:Z": [HEADER, ["R7", "Bob", "", "B", "Present"]],
            "Class2!A1:Z": [HEADER, ["R1", "Alice", "", "A", "Absent"]],
            "Class3!A1:Z": [HEADER, ["R1", "Alice again", "", "C", "Present"]],
        }
    )

    result = SheetRowIndex(sheets, CONFIG).find_student("R1")

    assert result == StudentMatch(
        sheet_name="Class2",
        header=tuple(HEADER),
        row=("R1", "Alice", "", "A", "Absent"),
    )
    assert sheets.calls == [("sid", "Class1!A1:Z"), ("sid", "Class2!A1:Z")]


def test_not_found_scans_every_sheet_once(fake_sheets):
    sheets = fake_sheets({"Class1!A1:Z": [HEADER, ["R7", "Bob", "", "B"]]})

    result = SheetRowIndex(sheets, CONFIG).find_student("R1")

    assert result == NotFound(roll_number="R1", sheets_searched=("Class1", "Class2", "Class3"))
    assert [c[1] for c in sheets.calls] == ["Class1!A1:Z", "Class2!A1:Z", "Class3!A1:Z"]


def test_explicit_sheet_list_overrides_config_order(fake_sheets):
    sheets = fake_sheets({"Class3!A1:Z": [HEADER, ["R1", "Alice", "", "A"]]})

    result = SheetRowIndex(sheets, CONFIG).find_student("R1", ["Class3", "Class1"])

    assert result.sheet_name == "Class3"
    assert sheets.calls == [("sid", "Class3!A1:Z")]


def test_roll_number_match_is_exact(fake_sheets):
    sheets = fake_sheets({"Class1!A1:Z": [HEADER, ["r1", "Alice", "", "A"], [" R1", "Bob", "", "B"]]})

    result = SheetRowIndex(sheets, CONFIG).find_student("R1")

    assert isinstance(result, NotFound)


def test_fetch_failure_aborts_search(fake_sheets):
    sheets = fake_sheets(
        {"Class3!A1:Z": [HEADER, ["R1", "Alice", "", "A"]]},
        fail_on={"Class2!A1:Z"},
    )

    with pytest.raises(RemoteFetchError):
        SheetRowIndex(sheets, CONFIG).find_student("R1")

    assert ("sid", "Class3!A1:Z") not in sheets.calls


def test_header_row_is_never_a_match():
    assert match_in_grid("Class1", [["R1", "Name", "X", "Section"]], "R1") is None


def test_empty_sheet_and_blank_rows_are_misses():
    assert match_in_grid("Class1", [], "R1") is None
    assert match_in_grid("Class1", [HEADER, [], ["R1", "Alice"]], "R1").row == ("R1", "Alice")
