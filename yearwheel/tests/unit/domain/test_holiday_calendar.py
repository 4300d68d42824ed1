from __future__ import annotations

from datetime import date

import pytest

from yearwheel.domain.holidays import (
    HOLIDAY_TYPE_KEY,
    PublicHoliday,
    country_local_name,
    country_name,
    easter_sunday,
    find_holiday,
    is_national_holiday,
    norwegian_holidays,
    public_holidays_to_activities,
)


@pytest.mark.parametrize(
    ("year", "expected"),
    [(2019, date(2019, 4, 21)), (2024, date(2024, 3, 31)), (2025, date(2025, 4, 20)), (2026, date(2026, 4, 5))],
)
def test_easter_sunday(year: int, expected: date) -> None:
    assert easter_sunday(year) == expected


def test_norwegian_holidays_2025() -> None:
    holidays = norwegian_holidays(2025)
    by_name = {holiday.name: holiday.date for holiday in holidays}

    assert len(holidays) == 13
    assert [holiday.date for holiday in holidays] == sorted(by_name.values())
    assert by_name["Good Friday"] == date(2025, 4, 18)
    assert by_name["Constitution Day"] == date(2025, 5, 17)
    assert by_name["Ascension Day"] == date(2025, 5, 29)
    assert by_name["Whit Monday"] == date(2025, 6, 9)
    assert all(holiday.is_national and holiday.country_code == "NO" for holiday in holidays)
    assert holidays[0].id == "no-2025-1"


def test_holidays_become_single_day_activities() -> None:
    national = PublicHoliday("no-2025-1", date(2025, 1, 1), "New Year's Day", "Første nyttårsdag", "NO", True)
    observance = PublicHoliday("x-1", date(2025, 2, 14), "Valentine's Day", "", "NO", False)

    first, second = public_holidays_to_activities([national, observance], "layer-h", "#123456")

    assert first.id == "layer-h-no-2025-1"
    assert first.title == "Første nyttårsdag"
    assert first.description == "New Year's Day (Public holiday)"
    assert first.start_date == first.end_date == date(2025, 1, 1)
    assert first.type_key == HOLIDAY_TYPE_KEY
    assert first.color == "#123456"
    assert first.highlight_color == "#880054"
    assert second.title == "Valentine's Day"
    assert second.description == "Valentine's Day"


def test_holiday_color_defaults_to_type_color() -> None:
    holiday = PublicHoliday("h", date(2025, 5, 1), "Labour Day", "", "NO", True)

    (activity,) = public_holidays_to_activities([holiday], "layer-h")

    assert activity.color == "#E3008C"


def test_national_flag_and_lookups() -> None:
    assert is_national_holiday(True, ["Public"]) is True
    assert is_national_holiday(True, ["Bank", "School"]) is True
    assert is_national_holiday(True, ["Observance"]) is False
    assert is_national_holiday(False, ["Public"]) is False
    assert country_name("no") == "Norway"
    assert country_name("XX") == "XX"
    assert country_local_name("SE") == "Sverige"
    holidays = norwegian_holidays(2025)
    assert find_holiday(date(2025, 12, 25), holidays).name == "Christmas Day"
    assert find_holiday(date(2025, 12, 24), holidays) is None
