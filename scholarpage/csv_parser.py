from __future__ import annotations

from typing import List

from .log_utils import logger, LogSource, LogCategory
from .models import Record, sort_by_year


def parse_csv_line(line: str) -> List[str]:
    """
    Split one data line into raw field values.

    A double quote toggles a quoted span and is dropped from the output;
    commas inside a quoted span are kept as text. Escaped quotes are not
    supported. The last field is emitted at the end of the line without
    needing a trailing comma.
    """
    values: List[str] = []
    current: List[str] = []
    in_quotes = False

    for ch in line:
        if ch == '"':
            in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            values.append("".join(current))
            current = []
        else:
            current.append(ch)

    values.append("".join(current))
    return values


def parse_csv(content: str) -> List[Record]:
    """
    Parse comma-separated text with a header row into records sorted by year,
    newest first.

    The header is split on plain commas. Each data line must produce at least
    as many fields as there are headers; shorter lines are skipped and extra
    trailing fields are ignored.
    """
    lines = (content or "").strip().split("\n")
    if len(lines) < 2:
        return []

    headers = [h.strip() for h in lines[0].split(",")]
    records: List[Record] = []

    for lineno, line in enumerate(lines[1:], start=2):
        values = parse_csv_line(line)
        if len(values) < len(headers):
            logger.debug(
                f"Line {lineno}: {len(values)} field(s), expected {len(headers)}; skipped",
                source=LogSource.TEACHING,
                category=LogCategory.SKIP,
            )
            continue
        records.append(Record({h: values[i].strip() for i, h in enumerate(headers)}))

    return sort_by_year(records)


class DelimitedRecordParser:
    """
    Parser for the teaching activities file.
    """

    def parse(self, text: str) -> List[Record]:
        return parse_csv(text)
