from __future__ import annotations

import re
import socket

import requests

__all__ = [
    "HTTP_ERRORS",
    "TIMEOUT_ERRORS",
    "NETWORK_ERRORS",
    "DECODE_ERRORS",
    "PARSE_ERRORS",
    "FILE_IO_ERRORS",
    "FILE_READ_ERRORS",
    "FILE_WRITE_ERRORS",
    "FETCH_ERRORS",
]

# errors raised by requests when an HTTP request fails or a URL cannot be reached
HTTP_ERRORS = (requests.exceptions.RequestException,)

# errors that signal an operation has taken too long and hit a timeout at the OS or socket level
TIMEOUT_ERRORS = (TimeoutError, socket.timeout)

# umbrella group for network-related failures, combining HTTP issues and timeouts
NETWORK_ERRORS = HTTP_ERRORS + TIMEOUT_ERRORS

# errors that occur when converting response bytes or file contents into text
DECODE_ERRORS = (UnicodeDecodeError, UnicodeError)

# errors raised while turning raw text into records (bad regex input, odd values, missing keys)
PARSE_ERRORS = (ValueError, TypeError, KeyError, IndexError, re.error)

# file system operation errors when reading source files or writing fragments
# Note: FileNotFoundError is a subclass of OSError, so both are included for clarity
FILE_IO_ERRORS = (FileNotFoundError, OSError)

# combined file read errors including I/O failures and encoding issues
FILE_READ_ERRORS = FILE_IO_ERRORS + DECODE_ERRORS

# file write operation errors including permissions, disk full, and encoding issues
FILE_WRITE_ERRORS = (OSError, TypeError, UnicodeEncodeError)

# everything that can go wrong while getting the source text, from disk or from the network
FETCH_ERRORS = NETWORK_ERRORS + FILE_READ_ERRORS
