import posixpath
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session

from blogful import service
from blogful.db import get_db
from blogful.models import Article
from blogful.sanitize import sanitize
from blogful.schemas import ArticleOut, ErrorOut
from blogful.validators import validate_create, validate_patch

router = APIRouter(prefix="/api/articles", tags=["articles"])

NOT_FOUND = {404: {"model": ErrorOut}}
BAD_REQUEST = {400: {"model": ErrorOut}}


async def read_json_body(request: Request) -> Dict[str, Any]:
    """Parse a JSON object body; anything else reads as an empty object."""
    if "json" not in request.headers.get("content-type", ""):
        return {}
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def load_article(article_id: int, db: Session = Depends(get_db)) -> Article:
    """Resolve ``article_id`` to its row for the verb handlers, or 404."""
    article = service.get_by_id(db, article_id)
    if article is None:
        raise HTTPException(status_code=404, detail="Article does not exist")
    return article


@router.get("", response_model=List[ArticleOut])
def list_articles(db: Session = Depends(get_db)):
    articles = service.get_all_articles(db)
    return [sanitize(a) for a in articles]


@router.post("", response_model=ArticleOut, status_code=201, responses=BAD_REQUEST)
def create_article(
    request: Request,
    response: Response,
    body: Dict[str, Any] = Depends(read_json_body),
    db: Session = Depends(get_db),
):
    new_article = validate_create(body)
    article = service.insert_article(db, new_article)
    response.headers["Location"] = posixpath.normpath(
        f"{request.url.path}/{article.id}"
    )
    return sanitize(article)


@router.get("/{article_id}", response_model=ArticleOut, responses=NOT_FOUND)
def get_article(article: Article = Depends(load_article)):
    return sanitize(article)


@router.delete("/{article_id}", status_code=204, responses=NOT_FOUND)
def delete_article(
    article: Article = Depends(load_article),
    db: Session = Depends(get_db),
):
    service.delete_article(db, article.id)
    return Response(status_code=204)


@router.patch("/{article_id}", status_code=204, responses={**NOT_FOUND, **BAD_REQUEST})
def update_article(
    article: Article = Depends(load_article),
    body: Dict[str, Any] = Depends(read_json_body),
    db: Session = Depends(get_db),
):
    article_to_update = validate_patch(body)
    service.update_article(db, article.id, article_to_update)
    return Response(status_code=204)
