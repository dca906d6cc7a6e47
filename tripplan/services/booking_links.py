"""Outbound booking links for a city."""

from __future__ import annotations

from urllib.parse import quote

from tripplan.services.i18n import DEFAULT_LOCALE, t

FLIGHTS_URL = "https://www.google.com/travel/flights?q={q}"
STAYS_URL = "https://www.booking.com/searchresults.html?ss={q}"

# Characters encodeURIComponent leaves untouched.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def booking_links(display_name: str, locale: str = DEFAULT_LOCALE) -> list[dict[str, str]]:
    q = encode_component(display_name)
    return [
        {"kind": "flights", "label": t("flights", locale), "url": FLIGHTS_URL.format(q=q)},
        {"kind": "stays", "label": t("stays", locale), "url": STAYS_URL.format(q=q)},
    ]


__all__ = ["booking_links", "encode_component"]
