from typing import Any, Dict, Optional

REQUIRED_FIELDS = ("title", "style", "content")
UPDATABLE_FIELDS = ("title", "content", "style")


class RequestValidationFailed(Exception):
    """Request body is missing data the operation needs."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def validate_create(body: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    body = body or {}
    new_article = {field: body.get(field) for field in REQUIRED_FIELDS}

    for field, value in new_article.items():
        if value is None:
            raise RequestValidationFailed(f"Missing '{field}' in request body")

    if "author" in body:
        new_article["author"] = body["author"]
    return new_article


def validate_patch(body: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    body = body or {}
    article_to_update = {
        field: body[field] for field in UPDATABLE_FIELDS if field in body
    }

    # only the count uses truthiness; falsy values still go to storage
    number_of_values = len([v for v in article_to_update.values() if v])
    if number_of_values == 0:
        raise RequestValidationFailed(
            "Request body must contain either 'title', 'style' or 'content'"
        )
    return article_to_update
