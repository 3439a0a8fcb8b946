"""
Output sanitization for article free-text fields.

Every response that carries article data goes through :func:`sanitize`, so the
list, fetch and create paths cannot drift apart.
"""

from typing import Any, Mapping, Optional

import bleach

ALLOWED_TAGS = frozenset(bleach.sanitizer.ALLOWED_TAGS) | {
    "br",
    "p",
    "pre",
    "img",
    "h1",
    "h2",
    "h3",
    "h4",
    "u",
    "s",
}

ALLOWED_ATTRIBUTES = {
    **bleach.sanitizer.ALLOWED_ATTRIBUTES,
    "img": ["src", "alt", "title", "width", "height"],
}

SANITIZED_FIELDS = ("id", "style", "title", "content", "date_published")


def clean_html(value: Optional[str]) -> Optional[str]:
    """Escape disallowed tags and drop disallowed attributes.

    Entities already present are left alone, so cleaning twice gives the same
    result as cleaning once.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        value = str(value)
    return bleach.clean(value, tags=ALLOWED_TAGS, attributes=ALLOWED_ATTRIBUTES)


def _field(article: Any, name: str) -> Any:
    if isinstance(article, Mapping):
        return article.get(name)
    return getattr(article, name)


def sanitize(article: Any) -> dict:
    """Return the client-facing view of an article row or mapping."""
    data = {name: _field(article, name) for name in SANITIZED_FIELDS}
    data["title"] = clean_html(data["title"])
    data["content"] = clean_html(data["content"])
    return data
