"""Public holidays as wheel activities.

Holidays come from a remote calendar feed (see ``adapters.holiday_rest``) or,
for Norway, from the static fallback below. Either way they become ordinary
single-day :class:`Activity` records on a holiday layer; the layout engine has
no holiday-specific logic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable, List, Optional, Sequence, Tuple

from .activity_types import type_color, type_highlight_color
from .entities import Activity
from .time_axis import as_date

HOLIDAY_TYPE_KEY = "holiday"


@dataclass(frozen=True)
class HolidayCountry:
    code: str
    name: str
    local_name: Optional[str] = None


@dataclass(frozen=True)
class PublicHoliday:
    id: str
    date: date
    name: str
    local_name: str
    country_code: str
    is_national: bool
    """Global public or bank holiday."""
    types: Tuple[str, ...] = field(default_factory=tuple)


SUPPORTED_COUNTRIES: Tuple[HolidayCountry, ...] = (
    HolidayCountry("NO", "Norway", "Norge"),
    HolidayCountry("SE", "Sweden", "Sverige"),
    HolidayCountry("DK", "Denmark", "Danmark"),
    HolidayCountry("FI", "Finland", "Suomi"),
    HolidayCountry("IS", "Iceland", "Ísland"),
    HolidayCountry("DE", "Germany", "Deutschland"),
    HolidayCountry("GB", "United Kingdom"),
    HolidayCountry("US", "United States"),
    HolidayCountry("FR", "France"),
    HolidayCountry("ES", "Spain", "España"),
    HolidayCountry("IT", "Italy", "Italia"),
    HolidayCountry("NL", "Netherlands", "Nederland"),
    HolidayCountry("BE", "Belgium", "België"),
    HolidayCountry("AT", "Austria", "Österreich"),
    HolidayCountry("CH", "Switzerland", "Schweiz"),
    HolidayCountry("PL", "Poland", "Polska"),
    HolidayCountry("PT", "Portugal"),
    HolidayCountry("IE", "Ireland"),
    HolidayCountry("CZ", "Czech Republic", "Česká republika"),
    HolidayCountry("AU", "Australia"),
    HolidayCountry("CA", "Canada"),
    HolidayCountry("JP", "Japan", "日本"),
)


def _country(code: str) -> Optional[HolidayCountry]:
    token = (code or "").strip().upper()
    return next((country for country in SUPPORTED_COUNTRIES if country.code == token), None)


def country_name(code: str) -> str:
    country = _country(code)
    return country.name if country else code


def country_local_name(code: str) -> Optional[str]:
    country = _country(code)
    return country.local_name if country else None


def is_national_holiday(is_global: bool, types: Iterable[str]) -> bool:
    kinds = set(types)
    return bool(is_global) and bool(kinds & {"Public", "Bank"})


def find_holiday(day: date, holidays: Iterable[PublicHoliday]) -> Optional[PublicHoliday]:
    day = as_date(day)
    return next((holiday for holiday in holidays if holiday.date == day), None)


def public_holidays_to_activities(
    holidays: Iterable[PublicHoliday],
    layer_id: str,
    layer_color: Optional[str] = None,
) -> List[Activity]:
    """One single-day holiday activity per record on ``layer_id``."""
    color = layer_color or type_color(HOLIDAY_TYPE_KEY)
    highlight = type_highlight_color(HOLIDAY_TYPE_KEY)
    activities: List[Activity] = []
    for holiday in holidays:
        suffix = " (Public holiday)" if holiday.is_national else ""
        activities.append(
            Activity(
                id=f"{layer_id}-{holiday.id}",
                title=holiday.local_name or holiday.name,
                start_date=holiday.date,
                end_date=holiday.date,
                layer_id=layer_id,
                type_key=HOLIDAY_TYPE_KEY,
                color=color,
                highlight_color=highlight,
                description=f"{holiday.name}{suffix}",
            )
        )
    return activities


# ---------------------------------------------------------------------------
# Static Norwegian calendar
# ---------------------------------------------------------------------------


def easter_sunday(year: int) -> date:
    """Gregorian Easter Sunday (anonymous Gregorian computus)."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)


# (English name, Norwegian name, fixed (month, day) or days relative to Easter)
_NORWEGIAN_CALENDAR: Sequence[Tuple[str, str, object]] = (
    ("New Year's Day", "Første nyttårsdag", (1, 1)),
    ("Palm Sunday", "Palmesøndag", -7),
    ("Maundy Thursday", "Skjærtorsdag", -3),
    ("Good Friday", "Langfredag", -2),
    ("Easter Sunday", "Første påskedag", 0),
    ("Easter Monday", "Andre påskedag", 1),
    ("Labour Day", "Arbeidernes dag", (5, 1)),
    ("Constitution Day", "Grunnlovsdag", (5, 17)),
    ("Ascension Day", "Kristi himmelfartsdag", 39),
    ("Whit Sunday", "Første pinsedag", 49),
    ("Whit Monday", "Andre pinsedag", 50),
    ("Christmas Day", "Første juledag", (12, 25)),
    ("Boxing Day", "Andre juledag", (12, 26)),
)


def norwegian_holidays(year: int) -> List[PublicHoliday]:
    """Norwegian national holidays for ``year``, sorted by date."""
    easter = easter_sunday(year)
    holidays: List[PublicHoliday] = []
    for index, (name, local_name, rule) in enumerate(_NORWEGIAN_CALENDAR, start=1):
        if isinstance(rule, tuple):
            day = date(year, rule[0], rule[1])
        else:
            day = easter + timedelta(days=int(rule))
        holidays.append(
            PublicHoliday(
                id=f"no-{year}-{index}",
                date=day,
                name=name,
                local_name=local_name,
                country_code="NO",
                is_national=True,
                types=("Public",),
            )
        )
    return sorted(holidays, key=lambda holiday: holiday.date)


__all__ = [
    "HOLIDAY_TYPE_KEY",
    "HolidayCountry",
    "PublicHoliday",
    "SUPPORTED_COUNTRIES",
    "country_local_name",
    "country_name",
    "easter_sunday",
    "find_holiday",
    "is_national_holiday",
    "norwegian_holidays",
    "public_holidays_to_activities",
]
