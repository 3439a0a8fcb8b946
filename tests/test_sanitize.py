from datetime import datetime
from types import SimpleNamespace

from blogful.sanitize import clean_html, sanitize


def make_row(**overrides):
    row = {
        "id": 7,
        "title": "Plain title",
        "style": "How-to",
        "content": "Plain content",
        "date_published": datetime(2029, 1, 22, 16, 28, 32),
        "author": 3,
    }
    row.update(overrides)
    return row


def test_script_tags_escaped():
    assert (
        clean_html("<script>alert('x')</script>bad")
        == "&lt;script&gt;alert('x')&lt;/script&gt;bad"
    )


def test_event_handler_attributes_removed():
    cleaned = clean_html('<img src="https://example.com/a.png" onerror="alert(1)">')
    assert cleaned == '<img src="https://example.com/a.png">'


def test_plain_text_and_allowed_markup_preserved():
    text = "Some <strong>bold</strong> and <em>quiet</em> words"
    assert clean_html(text) == text


def test_none_passes_through():
    assert clean_html(None) is None


def test_sanitize_only_touches_free_text():
    row = make_row(title="<script>x</script>", content='<a href="#" onclick="x()">go</a>')
    result = sanitize(row)
    assert result == {
        "id": 7,
        "style": "How-to",
        "title": "&lt;script&gt;x&lt;/script&gt;",
        "content": '<a href="#">go</a>',
        "date_published": datetime(2029, 1, 22, 16, 28, 32),
    }


def test_sanitize_accepts_objects():
    row = SimpleNamespace(**make_row(title="<b>hi</b>"))
    assert sanitize(row)["title"] == "<b>hi</b>"


def test_sanitize_is_idempotent():
    row = make_row(
        title='Naughty <script>alert("xss");</script> & co',
        content='Bad <img src="x.png" onerror="alert(1)"> &lt;already&gt;',
    )
    once = sanitize(row)
    assert sanitize(once) == once
