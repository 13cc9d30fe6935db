from scholarpage.config import (
    DEFAULT_PUBLICATION_SOURCE,
    DEFAULT_TEACHING_SOURCE,
    GENERIC_PUBLICATION_TYPE,
    HTTP_MAX_RETRIES,
    HTTP_RETRY_STATUS_CODES,
    PUBLICATION_TYPES,
)


def test_default_sources():
    """
    Test that the default sources point at the CSV and BibTeX files.
    """
    assert DEFAULT_TEACHING_SOURCE.endswith(".csv")
    assert DEFAULT_PUBLICATION_SOURCE.endswith(".bib")


def test_publication_types_complete():
    """
    Test that every publication type, and the fallback, has an icon and both labels.
    """
    for name, info in list(PUBLICATION_TYPES.items()) + [("generic", GENERIC_PUBLICATION_TYPE)]:
        for field in ("icon", "desc", "plural"):
            assert info.get(field), f"{name} is missing '{field}'"
        assert info["icon"].startswith("fas fa-"), f"{name} icon should be a Font Awesome class"


def test_publication_types_lowercase():
    """
    Test that type keys are lowercase, since parsed entry types always are.
    """
    for name in PUBLICATION_TYPES:
        assert name == name.lower()


def test_http_settings():
    assert isinstance(HTTP_MAX_RETRIES, int) and HTTP_MAX_RETRIES >= 0
    assert all(isinstance(code, int) and 400 <= code < 600 for code in HTTP_RETRY_STATUS_CODES)
