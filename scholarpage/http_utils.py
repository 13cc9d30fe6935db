from __future__ import annotations

from typing import Dict

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import (
    HTTP_TIMEOUT_DEFAULT,
    HTTP_BACKOFF_INITIAL,
    HTTP_MAX_RETRIES,
    HTTP_RETRY_STATUS_CODES,
)
from .exceptions import DECODE_ERRORS

DEFAULT_TEXT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (scholarpage builder)",
    "Accept": "text/plain,text/csv,application/x-bibtex,*/*;q=0.8",
}

# Global session for connection pooling
_SESSION = requests.Session()

_RETRY_STRATEGY = Retry(
    total=HTTP_MAX_RETRIES,
    backoff_factor=HTTP_BACKOFF_INITIAL,
    status_forcelist=HTTP_RETRY_STATUS_CODES,
    allowed_methods=["GET"],
)
_ADAPTER = HTTPAdapter(max_retries=_RETRY_STRATEGY)
_SESSION.mount("https://", _ADAPTER)
_SESSION.mount("http://", _ADAPTER)


def http_fetch_bytes(url: str, headers: Dict[str, str], timeout: float) -> bytes:
    """
    Perform an HTTP GET through the shared session and return the body as raw
    bytes. Non-2xx responses raise requests.HTTPError.
    """
    resp = _SESSION.get(url, headers=headers, timeout=timeout)
    resp.raise_for_status()
    return resp.content


def decode_text(raw: bytes) -> str:
    """
    Decode downloaded bytes by inspecting byte order marks, trying UTF-8
    first, and falling back to Latin-1.
    """
    if raw.startswith(b"\xef\xbb\xbf"):
        return raw.decode("utf-8-sig")
    if raw.startswith(b"\xff\xfe"):
        try:
            return raw[2:].decode("utf-16le")
        except DECODE_ERRORS:
            pass
    if raw.startswith(b"\xfe\xff"):
        try:
            return raw[2:].decode("utf-16be")
        except DECODE_ERRORS:
            pass
    try:
        return raw.decode("utf-8")
    except DECODE_ERRORS:
        return raw.decode("latin-1", errors="replace")


def http_get_text(url: str, timeout: float = HTTP_TIMEOUT_DEFAULT) -> str:
    """
    Download a text resource such as a CSV or BibTeX file and decode it.
    """
    raw = http_fetch_bytes(url, DEFAULT_TEXT_HEADERS.copy(), timeout)
    return decode_text(raw)
