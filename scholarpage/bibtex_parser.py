from __future__ import annotations

import re
from typing import Dict, List, Optional

from .exceptions import PARSE_ERRORS
from .log_utils import logger, LogSource, LogCategory
from .models import Record, sort_by_year
from .text_utils import clean_field

# "@" has already been split away, so the head reads: type{key,
_HEAD_RE = re.compile(r"^(\w+)\{([^,]+),?", re.ASCII)

# name = {value}, where value may hold balanced {...} pairs one level deep.
# Deeper nesting does not match and the field is left out of the record.
_FIELD_RE = re.compile(
    r"(\w+)\s*=\s*\{([^{}]*(?:\{[^{}]*\}[^{}]*)*)\}(?:,\s*)?",
    re.ASCII,
)


def _parse_head(entry: str) -> Optional[Dict[str, str]]:
    """
    Read the entry type and citation key from the first line of an entry.
    """
    first_line = entry.split("\n", 1)[0]
    m = _HEAD_RE.match(first_line)
    if not m:
        return None
    return {"type": m.group(1).lower(), "key": m.group(2)}


def parse_entry(entry: str) -> Optional[Record]:
    """
    Turn the text of a single entry (everything after its "@") into a record,
    or return None when the head does not look like type{key.

    Field names are lowercased and values have their whitespace collapsed.
    When a field appears twice, the later value wins.
    """
    try:
        head = _parse_head(entry)
        if not head:
            logger.debug(
                f"No type/key in entry starting {entry.strip()[:40]!r}; skipped",
                source=LogSource.PUBLICATIONS,
                category=LogCategory.SKIP,
            )
            return None

        fields: Dict[str, str] = {"type": head["type"], "key": head["key"]}
        for m in _FIELD_RE.finditer(entry):
            fields[m.group(1).lower()] = clean_field(m.group(2))
        return Record(fields)
    except PARSE_ERRORS as e:
        logger.debug(f"Entry could not be parsed: {e}", source=LogSource.PUBLICATIONS, category=LogCategory.SKIP)
        return None


def parse_bibtex(content: str) -> List[Record]:
    """
    Parse a whole bibliography into records sorted by year, newest first.

    The text is split on "@" and each chunk is parsed on its own, so a
    malformed entry only drops itself.
    """
    records: List[Record] = []
    for chunk in (content or "").split("@"):
        if not chunk.strip():
            continue
        rec = parse_entry(chunk)
        if rec is not None:
            records.append(rec)
    return sort_by_year(records)


class BibEntryParser:
    """
    Parser for the publications bibliography.
    """

    def parse(self, text: str) -> List[Record]:
        return parse_bibtex(text)
