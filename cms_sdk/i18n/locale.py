"""
Locale helpers

Pure functions for reducing request locale hints to a primary language tag.
"""

from __future__ import annotations


def primary_tag(locale: str) -> str:
    """Return the lower-cased primary subtag: "en-US" -> "en"."""
    return locale.split("-")[0].strip().lower()


def parse_accept_language(header: str | None) -> str | None:
    """Return the primary tag of the first Accept-Language entry.

    Quality values are ignored; the client's first preference wins, e.g.
    ``"fr-CA,fr;q=0.9,en;q=0.8"`` -> ``"fr"``. Returns None for an empty
    header or a bare wildcard.
    """
    if not header or not isinstance(header, str):
        return None
    first = header.split(",")[0].split(";")[0].strip()
    if not first or first == "*":
        return None
    return primary_tag(first) or None
