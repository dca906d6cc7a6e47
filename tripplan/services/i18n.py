"""Locale string tables for user-facing labels."""

from __future__ import annotations

from typing import Any

STRINGS: dict[str, dict[str, str]] = {
    "en": {
        "city": "City",
        "startDate": "Start Date",
        "endDate": "End Date",
        "interests": "Interests",
        "interest.culture": "Culture",
        "interest.food": "Food",
        "interest.nature": "Nature",
        "interest.shopping": "Shopping",
        "interest.kids": "Kids",
        "pace": "Pace",
        "pace.easy": "Easy",
        "pace.balanced": "Balanced",
        "pace.packed": "Packed",
        "generate": "Generate Itinerary",
        "reset": "Reset",
        "book": "Book",
        "exportJson": "Export JSON",
        "exportIcs": "Export ICS",
        "disclaimer": "Data is sample only. Walking times are estimates.",
        "day": "Day",
        "start": "Start",
        "walk": "{minutes} min walk · {km} km",
        "noResults": "No results.",
        "showingPopular": "Showing popular picks instead.",
        "flights": "Flights",
        "stays": "Stays",
    },
    "he": {
        "city": "עיר",
        "startDate": "תאריך התחלה",
        "endDate": "תאריך סיום",
        "interests": "תחומי עניין",
        "interest.culture": "תרבות",
        "interest.food": "אוכל",
        "interest.nature": "טבע",
        "interest.shopping": "קניות",
        "interest.kids": "ילדים",
        "pace": "קצב",
        "pace.easy": "קל",
        "pace.balanced": "מאוזן",
        "pace.packed": "צפוף",
        "generate": "בנה מסלול",
        "reset": "איפוס",
        "book": "הזמנה",
        "exportJson": "ייצוא JSON",
        "exportIcs": "ייצוא ICS",
        "disclaimer": "הנתונים לדוגמה בלבד. זמני ההליכה משוערים.",
        "day": "יום",
        "start": "התחלה",
        "walk": "{minutes} דק' הליכה · {km} ק\"מ",
        "noResults": "אין תוצאות.",
        "showingPopular": "מציגים במקום זאת מקומות פופולריים.",
        "flights": "טיסות",
        "stays": "לינה",
    },
}

DEFAULT_LOCALE = "en"


def t(key: str, locale: str = DEFAULT_LOCALE, **params: Any) -> str:
    """Look up `key` for `locale`, falling back to English and then to the key itself."""
    table = STRINGS.get(locale) or STRINGS[DEFAULT_LOCALE]
    text = table.get(key) or STRINGS[DEFAULT_LOCALE].get(key) or key
    return text.format(**params) if params else text


def text_direction(locale: str) -> str:
    return "rtl" if locale == "he" else "ltr"


__all__ = ["DEFAULT_LOCALE", "STRINGS", "t", "text_direction"]
