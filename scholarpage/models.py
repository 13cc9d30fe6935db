from __future__ import annotations

from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, List, Optional

from .text_utils import year_as_int


class Record(Mapping):
    """
    One parsed unit of site data, either a teaching activity or a publication,
    stored as a read-only mapping from field name to text value.

    There is no fixed schema. The fields that matter beyond display are
    ``type`` and ``key`` (always present on publications) and ``year``, which
    drives ordering.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Optional[Dict[str, str]] = None, **extra: str):
        data = dict(fields or {})
        data.update(extra)
        self._fields = data

    def __getitem__(self, name: str) -> str:
        return self._fields[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"Record({self._fields!r})"

    @property
    def type(self) -> str:
        return self._fields.get("type", "")

    @property
    def key(self) -> str:
        return self._fields.get("key", "")

    @property
    def year_int(self) -> int:
        """
        Numeric year used for ordering, 0 when missing or unparseable.
        """
        return year_as_int(self._fields.get("year"))


def sort_by_year(records: Iterable[Record]) -> List[Record]:
    """
    Order records newest first. Records with the same year, including those
    without a usable year, keep their original relative order.
    """
    return sorted(records, key=lambda r: r.year_int, reverse=True)
