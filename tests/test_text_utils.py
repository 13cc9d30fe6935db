from scholarpage import text_utils
from scholarpage.models import Record, sort_by_year


def test_clean_field():
    """
    Test whitespace normalization of field values.
    """
    test_cases = [
        ("Hello", "Hello"),
        ("  padded  ", "padded"),
        ("A   Study\n\t of  Things", "A Study of Things"),
        ("The {Great}   Paper", "The {Great} Paper"),
        ("", ""),
        (None, ""),
    ]

    for input_val, expected in test_cases:
        output = text_utils.clean_field(input_val)
        assert output == expected, f"Expected '{expected}', got '{output}'"


def test_year_as_int():
    """
    Test leading-integer year parsing with the 0 fallback.
    """
    test_cases = [
        ("2019", 2019),
        ("  2021", 2021),
        ("\u00a02022", 2022),
        ("2019/2020", 2019),
        ("2020a", 2020),
        ("+2018", 2018),
        ("-5", -5),
        ("n/a", 0),
        ("\u0662\u0660\u0662\u0660", 0),
        ("\uff12\uff10\uff12\uff10", 0),
        ("", 0),
        (None, 0),
        (2017, 2017),
    ]

    for input_val, expected in test_cases:
        output = text_utils.year_as_int(input_val)
        assert output == expected, f"{input_val!r}: expected {expected}, got {output}"


def test_slugify():
    test_cases = [
        ("Smith2020", "", "smith2020"),
        ("Café Society!", "", "cafe-society"),
        ("  --Deep   Learning--  ", "", "deep-learning"),
        ("Brescia2024:Graphs", "pub", "pub-brescia2024-graphs"),
        ("", "pub", "pub"),
        (None, "", ""),
    ]

    for text, prefix, expected in test_cases:
        assert text_utils.slugify(text, prefix=prefix) == expected


def test_slugify_length_bounded():
    slug = text_utils.slugify("word " * 50)

    assert len(slug) <= 60
    assert not slug.endswith("-")


def test_format_authors_highlight():
    """
    Test that authors are comma-joined and the highlighted name is bold.
    """
    output = text_utils.format_authors("Jane Smith and Lorenzo Brescia and Bob Ross", highlight="Lorenzo Brescia")

    assert output == "Jane Smith, <strong>Lorenzo Brescia</strong>, Bob Ross"


def test_format_authors_escapes_markup():
    output = text_utils.format_authors("A <script> and B & C", highlight="")

    assert output == "A &lt;script&gt;, B &amp; C"


def test_format_authors_empty():
    assert text_utils.format_authors(None) == ""
    assert text_utils.format_authors("") == ""


def test_format_course_type():
    assert text_utils.format_course_type('"Master, 6 CFU" ') == "Master, 6 CFU"
    assert text_utils.format_course_type(None) == ""


def test_record_mapping_behavior():
    """
    Test the read-only mapping behavior and the load-bearing accessors of Record.
    """
    rec = Record({"type": "article", "key": "k1"}, year="2020")

    assert dict(rec) == {"type": "article", "key": "k1", "year": "2020"}
    assert rec.type == "article"
    assert rec.key == "k1"
    assert rec.year_int == 2020
    assert rec.get("title") is None
    assert Record({}).year_int == 0
    assert Record({}).type == ""


def test_sort_by_year_stable():
    records = [Record({"n": str(i), "year": y}) for i, y in enumerate(["2019", "", "2020", "2019", "x"])]

    assert [r["n"] for r in sort_by_year(records)] == ["2", "0", "3", "1", "4"]
