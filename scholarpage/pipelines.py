from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from .bibtex_parser import parse_bibtex
from .config import DEFAULT_PUBLICATION_SOURCE, DEFAULT_TEACHING_SOURCE, HIGHLIGHT_AUTHOR
from .csv_parser import parse_csv
from .exceptions import FETCH_ERRORS
from .io_utils import load_source_text
from .log_utils import logger, LogSource, LogCategory
from .models import Record
from .render import (
    PUBLICATIONS_ERROR,
    TEACHING_ERROR,
    render_error,
    render_legend,
    render_publication_list,
    render_teaching_list,
)
from .store import RecordStore, StoreSnapshot


class _Pipeline(ABC):
    """
    Fetch one source, parse it once, and keep the records for rendering.

    Nothing happens at construction time; the host calls load() explicitly.
    A failed fetch or parse leaves no records behind and makes render()
    return the warning fragment.
    """

    source_name = LogSource.SYSTEM
    error_message = ""
    parse: Callable[[str], List[Record]]

    def __init__(self, source: str, fetch: Callable[..., str] = load_source_text):
        self.source = source
        self._fetch = fetch
        self.records: List[Record] = []
        self.error: Optional[Exception] = None
        self.loaded = False

    def load(self) -> bool:
        """
        Fetch and parse the source. Returns True on success; on failure the
        exception is logged and kept in ``error``.
        """
        self.records = []
        self.error = None
        self.loaded = False
        try:
            text = self._fetch(self.source, self.source_name)
        except FETCH_ERRORS as e:
            return self._fail(e)
        try:
            records = self.parse(text)
        except Exception as e:
            return self._fail(e)

        self.records = records
        self.loaded = True
        self._on_loaded()
        logger.success(f"Parsed {len(records)} record(s) from {self.source}", source=self.source_name,
                       category=LogCategory.PARSE)
        return True

    def _fail(self, e: Exception) -> bool:
        self.error = e
        logger.error(f"Error loading {self.source}: {e}", source=self.source_name, category=LogCategory.ERROR)
        return False

    def _on_loaded(self) -> None:
        pass

    def render(self) -> str:
        if self.error is not None or not self.loaded:
            return render_error(self.error_message)
        logger.debug(f"Rendering {len(self.records)} record(s)", source=self.source_name, category=LogCategory.RENDER)
        return self._render_loaded()

    @abstractmethod
    def _render_loaded(self) -> str:
        ...


class TeachingPipeline(_Pipeline):
    source_name = LogSource.TEACHING
    error_message = TEACHING_ERROR
    parse = staticmethod(parse_csv)

    def __init__(self, source: str = DEFAULT_TEACHING_SOURCE, fetch: Callable[..., str] = load_source_text):
        super().__init__(source, fetch)

    def _render_loaded(self) -> str:
        return render_teaching_list(self.records)


class PublicationPipeline(_Pipeline):
    """
    Publications pipeline. On top of loading it owns a RecordStore so the
    host page can toggle entry-type filters and re-render.
    """

    source_name = LogSource.PUBLICATIONS
    error_message = PUBLICATIONS_ERROR
    parse = staticmethod(parse_bibtex)

    def __init__(self, source: str = DEFAULT_PUBLICATION_SOURCE, fetch: Callable[..., str] = load_source_text,
                 highlight: str = HIGHLIGHT_AUTHOR):
        super().__init__(source, fetch)
        self.highlight = highlight
        self.store = RecordStore()

    def load(self) -> bool:
        self.store = RecordStore()
        return super().load()

    def _on_loaded(self) -> None:
        self.store = RecordStore(self.records)

    def toggle_filter(self, entry_type: str) -> bool:
        return self.store.toggle_filter(entry_type)

    def snapshot(self) -> StoreSnapshot:
        return self.store.snapshot()

    def _render_loaded(self) -> str:
        snap = self.snapshot()
        return render_legend(snap.legend) + "\n" + render_publication_list(snap.visible, self.highlight)
