from __future__ import annotations

import html
import re
from typing import Any, Optional

from unidecode import unidecode

from .config import ANCHOR_MAX_LENGTH, HIGHLIGHT_AUTHOR
from .exceptions import DECODE_ERRORS, PARSE_ERRORS


__all__ = [
    "clean_field",
    "year_as_int",
    "strip_accents",
    "slugify",
    "escape",
    "format_authors",
    "format_course_type",
]

_WHITESPACE_RUN = re.compile(r"\s+")
_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def clean_field(text: Optional[str]) -> str:
    """
    Collapse every run of whitespace, newlines included, into a single space
    and trim both ends. Braces inside the value are left untouched.
    """
    if not text:
        return ""
    return _WHITESPACE_RUN.sub(" ", text).strip()


def year_as_int(value: Any) -> int:
    """
    Read the leading integer of a year value the way the site scripts always
    did: leading whitespace and a sign are allowed, trailing text is ignored,
    and anything without leading digits counts as 0.
    """
    if value is None:
        return 0
    if isinstance(value, int):
        return value
    m = _LEADING_INT.match(str(value))
    if not m:
        return 0
    try:
        return int(m.group(1))
    except PARSE_ERRORS:
        return 0


def strip_accents(s: str) -> str:
    """
    Transliterate a string to plain ASCII so it can be used in identifiers.
    """
    try:
        return unidecode(s)
    except PARSE_ERRORS + DECODE_ERRORS:
        return s


def slugify(text: Optional[str], prefix: str = "") -> str:
    """
    Convert free-form text, such as a citation key or a course name, into a
    lowercase anchor id by replacing non-alphanumeric runs with single dashes.
    """
    t = strip_accents(text or "").lower().strip()
    t = re.sub(r"[^a-z0-9]+", "-", t)
    t = re.sub(r"-+", "-", t).strip("-")
    t = t[:ANCHOR_MAX_LENGTH].rstrip("-")
    if prefix:
        return f"{prefix}-{t}" if t else prefix
    return t


def escape(value: Optional[str]) -> str:
    return html.escape(value or "", quote=True)


def format_authors(authors: Optional[str], highlight: str = HIGHLIGHT_AUTHOR) -> str:
    """
    Turn a BibTeX author field ("A and B and C") into a comma-separated HTML
    string, wrapping the highlighted author in <strong>.
    """
    if not authors:
        return ""
    names = []
    for author in authors.split(" and "):
        name = author.strip()
        if highlight and name == highlight:
            names.append(f"<strong>{escape(name)}</strong>")
        else:
            names.append(escape(name))
    return ", ".join(names)


def format_course_type(course_type: Optional[str]) -> str:
    """Drop stray double quotes from a course type and trim it."""
    if not course_type:
        return ""
    return course_type.replace('"', "").strip()
