"""Property matching and utility classification for receipt text."""

from collections.abc import Sequence

from rentledger.models import Property, UtilityCategory

#: Checked top to bottom; the first category with a keyword hit wins.
UTILITY_KEYWORDS: tuple[tuple[UtilityCategory, tuple[str, ...]], ...] = (
    (UtilityCategory.ELECTRICITY, ("electricity", "electric", "energy", "power", "kwh")),
    (UtilityCategory.GAS, ("gas", "lpg", "heating")),
    (UtilityCategory.WATER, ("water", "sewer")),
    (
        UtilityCategory.WIFI,
        ("internet", "wifi", "wi-fi", "broadband", "nbn", "fibre", "fiber", "telecom", "telstra"),
    ),
    (UtilityCategory.COUNCIL, ("council", "municipal", "land tax", "property tax", "rates notice")),
    (
        UtilityCategory.REPAIRS,
        ("repair", "maintenance", "plumber", "plumbing", "handyman", "locksmith"),
    ),
)


def classify_utility(text: str) -> UtilityCategory | None:
    """Return the first category (in priority order) whose keywords occur in ``text``.

    Keywords are case-insensitive substrings, so run-together OCR output such
    as "GASBILL" still classifies.
    """
    haystack = text.casefold()
    for category, keywords in UTILITY_KEYWORDS:
        if any(keyword in haystack for keyword in keywords):
            return category
    return None


def match_property(text: str, properties: Sequence[Property]) -> Property | None:
    """Return the first property whose name or address appears in ``text``.

    Case-insensitive substring match; list order breaks ties. Blank names and
    addresses never match.
    """
    haystack = text.casefold()
    for prop in properties:
        for needle in (prop.name, prop.address):
            if needle and needle.strip() and needle.strip().casefold() in haystack:
                return prop
    return None
