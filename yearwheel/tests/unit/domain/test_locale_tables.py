from __future__ import annotations

from yearwheel.domain.locale import (
    DEFAULT_LOCALE,
    MONTH_NAMES,
    month_names,
    resolve_locale,
    weekday_names,
)


def test_every_locale_has_twelve_months_and_seven_days() -> None:
    for locale, names in MONTH_NAMES.items():
        assert len(names) == 12, locale
        assert len(weekday_names(locale)) == 7, locale


def test_resolve_locale_uses_language_prefix() -> None:
    assert resolve_locale("nn-NO") == "nn"
    assert resolve_locale(None, "xx", "en_US") == "en"
    assert resolve_locale("de") == DEFAULT_LOCALE
    assert resolve_locale() == DEFAULT_LOCALE


def test_month_names_fall_back_to_english() -> None:
    assert month_names("nb")[4] == "mai"
    assert month_names("se")[0] == "ođđj"
    assert month_names("fr") == MONTH_NAMES["en"]
    assert month_names(None) == MONTH_NAMES["en"]
