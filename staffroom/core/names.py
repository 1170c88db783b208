# staffroom/core/names.py
"""Teacher name canonicalization.

Spreadsheets spell the same person many ways (" jane DOE ", "Jane  Doe").
Everything that stores or looks up a teacher goes through these helpers so
the registry sees one spelling per person.
"""
import re

HONORIFICS = ("sir", "miss", "mrs", "mr", "dr")

_WHITESPACE_RE = re.compile(r"\s+")
_HONORIFIC_RE = re.compile(r"^(%s)\s+" % "|".join(HONORIFICS), re.IGNORECASE)
_WORD_START_RE = re.compile(r"\b\w")


def normalize_teacher_name(raw: str | None) -> str:
    """Trim, collapse whitespace, lower-case a leading honorific, capitalize word starts.

    Only the first character of each word is touched, so "McDonald" survives
    and "JANE DOE" stays upper-case. An empty or blank input gives "".
    """
    if not raw:
        return ""
    name = _WHITESPACE_RE.sub(" ", raw.strip())
    name = _HONORIFIC_RE.sub(lambda m: m.group(0).lower(), name)
    return _WORD_START_RE.sub(lambda m: m.group(0).upper(), name)


def name_key(name: str | None) -> str:
    """Case-insensitive lookup key for a (possibly raw) teacher name."""
    return normalize_teacher_name(name).lower()


def generate_initials(name: str | None) -> str:
    if not name:
        return ""
    return "".join(part[0].upper() for part in name.split())
