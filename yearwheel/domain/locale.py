"""Month and weekday label tables for the supported locales.

The engine never resolves locales itself; callers pick a table here (or pass
their own twelve labels) and hand it to the tick generator.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

DEFAULT_LOCALE = "nb"
FALLBACK_LOCALE = "en"

SUPPORTED_LOCALES: Dict[str, str] = {
    "nb": "Norsk bokmål",
    "nn": "Norsk nynorsk",
    "se": "Davvisámegiella",
    "en": "English",
}

MONTH_NAMES: Dict[str, Tuple[str, ...]] = {
    "en": ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
    "nb": ("jan", "feb", "mar", "apr", "mai", "jun", "jul", "aug", "sep", "okt", "nov", "des"),
    "nn": ("jan", "feb", "mar", "apr", "mai", "jun", "jul", "aug", "sep", "okt", "nov", "des"),
    "se": ("ođđj", "guov", "njuk", "cuoŋ", "mies", "geas", "suoi", "borg", "čakč", "golg", "skáb", "juov"),
}

# Monday first.
WEEKDAY_NAMES: Dict[str, Tuple[str, ...]] = {
    "en": ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
    "nb": ("man", "tir", "ons", "tor", "fre", "lør", "søn"),
    "nn": ("mån", "tys", "ons", "tor", "fre", "lau", "søn"),
    "se": ("vuos", "maŋ", "gask", "duor", "bear", "láv", "sot"),
}


def _language(tag: Optional[str]) -> str:
    if not tag:
        return ""
    return str(tag).strip().replace("_", "-").split("-", 1)[0].lower()


def resolve_locale(*candidates: Optional[str]) -> str:
    """Return the first supported language among ``candidates`` (e.g. ``"nb-no"``)."""
    for candidate in candidates:
        language = _language(candidate)
        if language in SUPPORTED_LOCALES:
            return language
    return DEFAULT_LOCALE


def month_names(locale: Optional[str] = None) -> Tuple[str, ...]:
    """Short month names for ``locale``; unknown locales get English."""
    return MONTH_NAMES.get(_language(locale), MONTH_NAMES[FALLBACK_LOCALE])


def weekday_names(locale: Optional[str] = None) -> Tuple[str, ...]:
    return WEEKDAY_NAMES.get(_language(locale), WEEKDAY_NAMES[FALLBACK_LOCALE])


__all__ = [
    "DEFAULT_LOCALE",
    "MONTH_NAMES",
    "SUPPORTED_LOCALES",
    "WEEKDAY_NAMES",
    "month_names",
    "resolve_locale",
    "weekday_names",
]
