from scholarpage import render
from scholarpage.models import Record
from scholarpage.store import RecordStore
from scholarpage.bibtex_parser import parse_bibtex


def test_teaching_item_with_url():
    """
    Test that a teaching activity with a URL links its course name and shows all metadata.
    """
    activity = Record({
        "course_name": "Machine Learning",
        "role": "Teaching Assistant",
        "year": "2023",
        "place": "University of Pisa",
        "course_type": '"Master"',
        "url": "https://example.org/ml",
        "description": "Labs and exams",
    })
    html = render.render_teaching_item(activity)

    assert '<a href="https://example.org/ml" target="_blank"' in html
    assert ">Machine Learning</a>" in html
    assert "Teaching Assistant (2023)" in html
    assert "University of Pisa" in html
    assert "fa-graduation-cap me-1\"></i>Master</span>" in html
    assert "teaching-description" in html
    assert 'id="course-machine-learning-2023"' in html


def test_teaching_item_minimal():
    """
    Test the fallbacks for an activity with almost no fields.
    """
    html = render.render_teaching_item(Record({"year": ""}))

    assert '<span class="fw-bold">Untitled Course</span>' in html
    assert "teaching-description" not in html
    assert "<a " not in html


def test_teaching_item_escapes_text():
    html = render.render_teaching_item(Record({"course_name": "C<T> & more"}))

    assert "C&lt;T&gt; &amp; more" in html
    assert "<T>" not in html


def test_empty_lists():
    assert "No teaching activities found." in render.render_teaching_list([])
    assert "No publications found." in render.render_publication_list([])


def test_publication_item():
    """
    Test a conference paper: type icon, link, highlighted author, year, venue and DOI.
    """
    pub = parse_bibtex(
        "@inproceedings{Brescia2024, title = {Graphs}, author = {Jane Smith and Lorenzo Brescia}, "
        "year = {2024}, booktitle = {Workshop}, journal = {Ignored}, url = {https://example.org/p}, "
        "doi = {10.1000/xyz}}"
    )[0]
    html = render.render_publication_item(pub, highlight="Lorenzo Brescia")

    assert "fas fa-users" in html
    assert '<a href="https://example.org/p"' in html
    assert "Jane Smith, <strong>Lorenzo Brescia</strong> (2024)" in html
    assert "Workshop" in html
    assert "Ignored" not in html
    assert "https://doi.org/10.1000/xyz" in html
    assert 'data-type="inproceedings"' in html
    assert 'id="pub-brescia2024"' in html


def test_publication_item_fallbacks():
    """
    Test an entry of unknown type with no title: generic icon and "Untitled".
    """
    html = render.render_publication_item(Record({"type": "phdthesis", "key": "t1", "journal": "J"}))

    assert "fas fa-file " in html
    assert "Untitled" in html
    assert "publication-authors" not in html
    assert ">J</span>" in html


def test_legend_badges():
    """
    Test that legend badges carry the type, label, count and active state.
    """
    store = RecordStore(parse_bibtex("@article{a, year={2020}}\n@article{b, title={B}}\n@misc{m, year={2019}}"))
    store.toggle_filter("misc")
    html = render.render_legend(store.legend())

    assert "Legend:" in html
    assert 'data-type="article"' in html
    assert "Journal Articles (2)" in html
    assert 'class="badge bg-primary active publication-filter" role="button" data-type="misc"' in html
    assert 'class="badge bg-secondary publication-filter" role="button" data-type="article"' in html


def test_empty_legend():
    html = render.render_legend([])

    assert "Legend:" not in html
    assert "publication-types-helper" in html


def test_error_fragment():
    html = render.render_error(render.PUBLICATIONS_ERROR)

    assert "alert alert-warning" in html
    assert "Unable to load publications." in html
