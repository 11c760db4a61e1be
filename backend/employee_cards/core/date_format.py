"""Date Format — conversion between ISO dates and the printed card date.

Invariants:
    - Display form is DD/Mon/YYYY with a fixed English 3-letter month table
    - Canonical form is YYYY-MM-DD (what a date-picker produces)
    - Never raises: malformed input degrades to "" (or to the Jan/01 fallback
      for an unrecognized month), matching the lenient form behavior
    - to_display(to_iso(s)) == s for well-formed DD/Mon/YYYY with a known month

Design Decisions:
    - Table lookup over strftime/strptime: locale independent, and the tolerant
      parsing below accepts partial dates that strptime would reject
"""

import re

MONTH_ABBREVIATIONS: dict[str, str] = {
    "01": "Jan", "02": "Feb", "03": "Mar", "04": "Apr",
    "05": "May", "06": "Jun", "07": "Jul", "08": "Aug",
    "09": "Sep", "10": "Oct", "11": "Nov", "12": "Dec",
}
MONTH_NUMBERS: dict[str, str] = {
    abbr: number for number, abbr in MONTH_ABBREVIATIONS.items()
}

_FALLBACK_ABBREVIATION = "Jan"
_FALLBACK_NUMBER = "01"
_LETTERS = re.compile(r"[a-zA-Z]")


def to_display(iso: str | None) -> str:
    """Convert "YYYY-MM-DD" to "DD/Mon/YYYY". Empty input yields ""."""
    if not iso:
        return ""
    parts = iso.split("-")
    year = parts[0]
    month = parts[1] if len(parts) > 1 else ""
    day = parts[2] if len(parts) > 2 else ""
    abbreviation = MONTH_ABBREVIATIONS.get(month, _FALLBACK_ABBREVIATION)
    return f"{day.rjust(2, '0')}/{abbreviation}/{year}"


def to_iso(display: str | None) -> str:
    """Convert "DD/Mon/YYYY" (or slash-separated numeric Y/M/D) to "YYYY-MM-DD".

    Anything that is not exactly three "/"-separated parts yields "".
    """
    if not display:
        return ""
    parts = display.split("/")
    if len(parts) != 3:
        return ""
    first, middle, last = parts
    if _has_letters(middle):
        month = MONTH_NUMBERS.get(middle[:3], _FALLBACK_NUMBER)
        return f"{last}-{month}-{first.rjust(2, '0')}"
    # Already ISO-ordered, only padding is missing
    return f"{first.rjust(4, '0')}-{middle.rjust(2, '0')}-{last.rjust(2, '0')}"


def _has_letters(text: str) -> bool:
    return _LETTERS.search(text) is not None
