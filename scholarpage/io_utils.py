from __future__ import annotations

import os
from typing import List

from .exceptions import FILE_WRITE_ERRORS
from .http_utils import http_get_text
from .log_utils import logger, LogCategory


def _project_root() -> str:
    """
    Return the absolute path to the project root directory, inferred from the location of this module on disk.
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))


def _candidate_paths(primary: str) -> List[str]:
    """
    Build the ordered list of file paths to try for a source: the path as
    given, then the same path relative to the project root.
    """
    candidates: List[str] = [primary]
    if not os.path.isabs(primary):
        rooted = os.path.join(_project_root(), primary)
        if rooted != primary:
            candidates.append(rooted)
    return candidates


def is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def read_source_file(path: str) -> str:
    """
    Read a UTF-8 source file, trying the project-root-relative location when
    the path is not found as given. A leading byte order mark is dropped.
    """
    candidates = _candidate_paths(path)
    for p in candidates:
        try:
            with open(p, "r", encoding="utf-8-sig") as f:
                return f.read()
        except FileNotFoundError:
            continue
    raise FileNotFoundError(f"Source file not found (tried: {', '.join(candidates)})")


def load_source_text(source: str, source_name: str = "") -> str:
    """
    Fetch the raw text of a data source, either a local file or an http(s) URL.
    Errors propagate to the caller; nothing is retried here beyond the HTTP
    adapter's own retry policy.
    """
    logger.info(f"Fetching {source}", source=source_name or None, category=LogCategory.FETCH)
    if is_url(source):
        return http_get_text(source)
    return read_source_file(source)


def safe_write_file(path: str, content: str, encoding: str = "utf-8", makedirs: bool = True) -> bool:
    """
    Safely write content to a file, optionally creating parent directories.
    """
    if makedirs:
        parent_dir = os.path.dirname(path)
        if parent_dir:
            try:
                os.makedirs(parent_dir, exist_ok=True)
            except OSError:
                return False

    try:
        with open(path, "w", encoding=encoding) as f:
            f.write(content)
        return True
    except FILE_WRITE_ERRORS:
        return False
