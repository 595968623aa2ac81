"""Regular expressions and small text helpers used by the capture nodes.

All helpers are pure: they take a string and return the extracted value
together with the text left over after removing it.
"""
import re
from datetime import date

# Keycap digit: "1️⃣" is "1" + U+FE0F (optional in pasted text) + U+20E3.
NUMBERED_MARKER = re.compile(r"\d\ufe0f?\u20e3")

LABELED_MARKERS = ("Destinatario", "Entrega", "Dirección", "Tarjeta")
LABELED_MARKER = re.compile(
    r"^[ \t]*(" + "|".join(LABELED_MARKERS) + r")[ \t]*:",
    re.IGNORECASE | re.MULTILINE,
)

PHONE = re.compile(r"\+?\d[\d \t-]{6,}\d")  # 8+ characters on one line, digit at both ends

# 4-digit year listed first so "04/02/2026" never reads as year 20.
DATE = re.compile(r"(?<!\d)(\d{1,2})([/-])(\d{1,2})\2(\d{4}|\d{2})(?!\d)")

GPS_URL = re.compile(r"https?://(?:maps|goo\.gl|www\.google\.com/maps)\S*", re.IGNORECASE)

# First colon that is not the "://" of a URL.
LABEL_COLON = re.compile(r":(?!//)")

LIST_MARKER = re.compile(r"^\d+[.)]\s*")
LEADING_NON_WORD = re.compile(r"^\W+")
TRAILING_SEPARATORS = re.compile(r"[\s,;:/-]+$")
WHITESPACE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    return WHITESPACE.sub(" ", text).strip()


def strip_label(text: str, labels: list[str]) -> str:
    """Remove the first known label phrase found at the start of `text`.

    Matching is case-insensitive and tolerates leading whitespace and a
    trailing colon after the phrase.
    """
    for label in labels:
        pattern = re.compile(r"^\s*" + re.escape(label) + r"(?!\w)\s*:?", re.IGNORECASE)
        match = pattern.match(text)
        if match:
            return text[match.end():]
    return text


def remove_span(text: str, span: tuple[int, int]) -> str:
    start, end = span
    return text[:start] + " " + text[end:]


def find_phone(text: str) -> tuple[str | None, str]:
    match = PHONE.search(text)
    if not match:
        return None, text
    phone = re.sub(r"[\s-]", "", match.group())
    return phone, remove_span(text, match.span())


def clean_name(text: str) -> str:
    text = LEADING_NON_WORD.sub("", text)
    text = LIST_MARKER.sub("", text)
    text = collapse_whitespace(text)
    return TRAILING_SEPARATORS.sub("", text)


def find_date(text: str) -> tuple[str | None, str]:
    """Return the first calendar-valid date as YYYY-MM-DD and the remaining text.

    Day and month are kept in the order written (day first). Two-digit years
    are read as 20YY.
    """
    for match in DATE.finditer(text):
        day, _, month, year = match.groups()
        if len(year) == 2:
            year = "20" + year
        try:
            parsed = date(int(year), int(month), int(day))
        except ValueError:
            continue
        return parsed.isoformat(), remove_span(text, match.span())
    return None, text


def find_gps_url(text: str) -> tuple[str | None, str]:
    match = GPS_URL.search(text)
    if not match:
        return None, text
    return match.group(), remove_span(text, match.span())


def after_label_colon(text: str) -> str:
    match = LABEL_COLON.search(text)
    if not match:
        return text
    return text[match.end():]
