from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Set, Tuple

from .config import GENERIC_PUBLICATION_TYPE, PUBLICATION_TYPES
from .log_utils import logger, LogSource, LogCategory
from .models import Record


def type_info(entry_type: str) -> Dict[str, str]:
    """
    Look up the icon and labels for a publication type, falling back to the generic entry.
    """
    return PUBLICATION_TYPES.get(entry_type, GENERIC_PUBLICATION_TYPE)


@dataclass(frozen=True)
class LegendItem:
    """
    One badge of the publication legend: a type present in the collection,
    how many records carry it, and whether it is currently selected.
    """
    type: str
    desc: str
    icon: str
    count: int
    active: bool


@dataclass(frozen=True)
class StoreSnapshot:
    """
    Immutable view handed to the presentation layer after every change.
    """
    visible: Tuple[Record, ...]
    legend: Tuple[LegendItem, ...]
    active_filters: FrozenSet[str]
    total: int


class RecordStore:
    """
    Hold a parsed collection together with the set of selected entry types.

    The collection never changes after construction; the filter set is the
    only mutable state. An empty filter set shows every record.
    """

    def __init__(self, records: Iterable[Record] = ()):
        self._records: Tuple[Record, ...] = tuple(records)
        self._filters: Set[str] = set()

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    @property
    def active_filters(self) -> FrozenSet[str]:
        return frozenset(self._filters)

    def visible_records(self) -> List[Record]:
        """
        Return the records whose type is selected, in collection order, or all
        of them when nothing is selected.
        """
        if not self._filters:
            return list(self._records)
        return [r for r in self._records if r.get("type") in self._filters]

    def toggle_filter(self, entry_type: str) -> bool:
        """
        Select the type if it is not selected, deselect it otherwise.
        Returns True when the type is selected afterwards.
        """
        if entry_type in self._filters:
            self._filters.remove(entry_type)
            active = False
        else:
            self._filters.add(entry_type)
            active = True
        logger.debug(
            f"Filter {entry_type!r} {'on' if active else 'off'}; active={sorted(self._filters)}",
            source=LogSource.PUBLICATIONS,
            category=LogCategory.FILTER,
        )
        return active

    def clear_filters(self) -> None:
        self._filters.clear()

    def type_counts(self) -> Dict[str, int]:
        """
        Count records per type over the whole collection, in first-seen order.
        """
        counts: Dict[str, int] = {}
        for r in self._records:
            t = r.get("type")
            if t:
                counts[t] = counts.get(t, 0) + 1
        return counts

    def legend(self) -> List[LegendItem]:
        """
        Build the legend from the current collection and filter set. Known
        types come first in their configured order, then any other types in
        the order they first appear.
        """
        counts = self.type_counts()
        ordered = [t for t in PUBLICATION_TYPES if t in counts]
        ordered += [t for t in counts if t not in PUBLICATION_TYPES]

        items = []
        for t in ordered:
            info = type_info(t)
            items.append(
                LegendItem(
                    type=t,
                    desc=info["plural"],
                    icon=info["icon"],
                    count=counts[t],
                    active=t in self._filters,
                )
            )
        return items

    def snapshot(self) -> StoreSnapshot:
        return StoreSnapshot(
            visible=tuple(self.visible_records()),
            legend=tuple(self.legend()),
            active_filters=self.active_filters,
            total=len(self._records),
        )
