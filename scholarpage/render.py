from __future__ import annotations

from typing import Iterable

from .config import HIGHLIGHT_AUTHOR
from .models import Record
from .store import LegendItem, type_info
from .text_utils import escape, format_authors, format_course_type, slugify

TEACHING_ERROR = "Unable to load teaching activities. Please check if the CSV file exists."
PUBLICATIONS_ERROR = "Unable to load publications. Please check if the BibTeX file exists."


def _title_html(title: str, url: str) -> str:
    if url:
        return (
            f'<a href="{escape(url)}" target="_blank" rel="noopener" '
            f'class="text-decoration-none fw-bold">{escape(title)}</a>'
        )
    return f'<span class="fw-bold">{escape(title)}</span>'


def render_teaching_item(activity: Record) -> str:
    """
    Render one teaching activity: course name (linked when a URL is given),
    role and year, place and course type, and an optional description.
    """
    course_name = activity.get("course_name") or "Untitled Course"
    role = activity.get("role") or ""
    year = activity.get("year") or ""
    place = activity.get("place") or ""
    course_type = format_course_type(activity.get("course_type"))
    description = activity.get("description") or ""
    anchor = slugify(f"{course_name} {year}", prefix="course")

    meta = []
    if place:
        meta.append(f'<span class="me-3"><i class="fas fa-map-marker-alt me-1"></i>{escape(place)}</span>')
    if course_type:
        meta.append(f'<span><i class="fas fa-graduation-cap me-1"></i>{escape(course_type)}</span>')

    parts = [
        f'<div class="teaching-item border-bottom pb-3 mb-3" id="{anchor}">',
        f'  <div class="teaching-title mb-1">{_title_html(course_name, activity.get("url") or "")}</div>',
        f'  <div class="teaching-role text-muted small mb-1">{escape(role)}{f" ({escape(year)})" if year else ""}</div>',
        f'  <div class="teaching-meta small text-secondary">{"".join(meta)}</div>',
    ]
    if description:
        parts.append(f'  <div class="teaching-description small text-muted mt-2">{escape(description)}</div>')
    parts.append("</div>")
    return "\n".join(parts)


def render_teaching_list(activities: Iterable[Record]) -> str:
    items = [render_teaching_item(a) for a in activities]
    if not items:
        body = '<p class="text-muted">No teaching activities found.</p>'
    else:
        body = "\n".join(items)
    return f'<div class="teaching-list mt-4">\n{body}\n</div>'


def render_publication_item(pub: Record, highlight: str = HIGHLIGHT_AUTHOR) -> str:
    """
    Render one publication with its type icon, title, authors and year, and
    venue. A DOI link is shown when the entry has one.
    """
    info = type_info(pub.get("type") or "")
    title = pub.get("title") or "Untitled"
    authors = format_authors(pub.get("author"), highlight)
    venue = pub.get("booktitle") or pub.get("journal") or ""
    year = pub.get("year") or ""
    doi = pub.get("doi") or ""
    anchor = slugify(pub.get("key"), prefix="pub")

    parts = [
        f'<div class="publication-item border-bottom pb-3 mb-3" id="{anchor}" data-type="{escape(pub.get("type"))}">',
        '  <div class="publication-title mb-1">',
        f'    <i class="{info["icon"]} text-primary me-2" title="{escape(info["desc"])}"></i>',
        f'    {_title_html(title, pub.get("url") or "")}',
        "  </div>",
    ]
    if authors:
        parts.append(
            f'  <div class="publication-authors text-muted small mb-1">{authors}{f" ({escape(year)})" if year else ""}</div>'
        )
    meta = []
    if venue:
        meta.append(f'<span><i class="fas fa-map-marker-alt me-1"></i>{escape(venue)}</span>')
    if doi:
        meta.append(
            f'<span class="ms-3"><a href="https://doi.org/{escape(doi)}" target="_blank" rel="noopener">'
            f"doi:{escape(doi)}</a></span>"
        )
    parts.append(f'  <div class="publication-meta small text-secondary">{"".join(meta)}</div>')
    parts.append("</div>")
    return "\n".join(parts)


def render_legend(legend: Iterable[LegendItem]) -> str:
    """
    Render the legend as clickable badges, one per type present. Selected
    types get the "active" class; the host page toggles them by data-type.
    """
    badges = []
    for item in legend:
        css = "bg-primary active" if item.active else "bg-secondary"
        badges.append(
            f'<span class="badge {css} publication-filter" role="button" data-type="{escape(item.type)}">'
            f'<i class="{item.icon} me-1"></i>{escape(item.desc)} ({item.count})</span>'
        )
    if not badges:
        return '<div class="publication-types-helper mb-4 p-3 bg-light rounded"></div>'
    return (
        '<div class="publication-types-helper mb-4 p-3 bg-light rounded">\n'
        '<h6 class="mb-2">Legend:</h6>\n'
        '<div class="d-flex flex-wrap gap-3 justify-content-center">\n'
        + "\n".join(badges)
        + "\n</div>\n</div>"
    )


def render_publication_list(publications: Iterable[Record], highlight: str = HIGHLIGHT_AUTHOR) -> str:
    items = [render_publication_item(p, highlight) for p in publications]
    if not items:
        body = '<p class="text-muted">No publications found.</p>'
    else:
        body = "\n".join(items)
    return f'<div class="publications-list mt-4">\n{body}\n</div>'


def render_error(message: str) -> str:
    return (
        '<div class="alert alert-warning mt-4">\n'
        f'<i class="fas fa-exclamation-triangle me-2"></i>{escape(message)}\n'
        "</div>"
    )
