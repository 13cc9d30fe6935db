from __future__ import annotations

# source files published next to the site pages; either may also be an http(s) URL
DEFAULT_TEACHING_SOURCE = "extras/courses.csv"
DEFAULT_PUBLICATION_SOURCE = "extras/pub.bib"

DEFAULT_OUT_DIR = "output"
TEACHING_FRAGMENT = "teaching.html"
PUBLICATIONS_FRAGMENT = "publications.html"
RUN_LOG = "run.log"

# Author name rendered in bold inside publication author lists
HIGHLIGHT_AUTHOR = "Lorenzo Brescia"

# Known publication types, in legend order.
# Each entry maps the lowercased BibTeX type to its icon class, the label used
# next to a single publication, and the plural label used in the legend.
PUBLICATION_TYPES = {
    "inproceedings": {
        "icon": "fas fa-users",
        "desc": "Conference/Workshop Paper",
        "plural": "Conference/Workshop Papers",
    },
    "article": {
        "icon": "fas fa-file-alt",
        "desc": "Journal Article",
        "plural": "Journal Articles",
    },
    "book": {
        "icon": "fas fa-book",
        "desc": "Book",
        "plural": "Books",
    },
    "incollection": {
        "icon": "fas fa-book-open",
        "desc": "Book Chapter",
        "plural": "Book Chapters",
    },
    "techreport": {
        "icon": "fas fa-clipboard",
        "desc": "Technical Report",
        "plural": "Technical Reports",
    },
    "misc": {
        "icon": "fas fa-file",
        "desc": "Miscellaneous",
        "plural": "Miscellaneous",
    },
}

# fallback for entry types missing from PUBLICATION_TYPES
GENERIC_PUBLICATION_TYPE = {
    "icon": "fas fa-file",
    "desc": "Publication",
    "plural": "Publications",
}

# HTTP request configuration, used only when a source is a URL
HTTP_TIMEOUT_DEFAULT = 10.0

# Exponential backoff configuration for retries
HTTP_BACKOFF_INITIAL = 0.25  # Initial backoff delay in seconds
HTTP_MAX_RETRIES = 2         # Maximum number of retry attempts

# HTTP status codes that should trigger retries
HTTP_RETRY_STATUS_CODES = (408, 429, 500, 502, 503, 504)

# Maximum length of generated anchor ids
ANCHOR_MAX_LENGTH = 60
