"""
Article persistence (SQLAlchemy ORM).

Plain row-level operations; the HTTP layer decides what to do with missing
rows. Database errors propagate to the caller.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from blogful.models import Article

logger = logging.getLogger(__name__)


def get_all_articles(db: Session) -> List[Article]:
    logger.debug("select all articles")
    return db.query(Article).order_by(Article.id).all()


def get_by_id(db: Session, article_id: int) -> Optional[Article]:
    logger.debug("select article id=%s", article_id)
    return db.query(Article).filter(Article.id == article_id).first()


def insert_article(db: Session, new_article: Dict[str, Any]) -> Article:
    db_article = Article(**new_article)
    db.add(db_article)
    db.commit()
    db.refresh(db_article)
    logger.debug("inserted article id=%s", db_article.id)
    return db_article


def update_article(db: Session, article_id: int, fields: Dict[str, Any]) -> int:
    num_rows_affected = (
        db.query(Article)
        .filter(Article.id == article_id)
        .update(fields, synchronize_session=False)
    )
    db.commit()
    logger.debug("updated article id=%s rows=%s", article_id, num_rows_affected)
    return num_rows_affected


def delete_article(db: Session, article_id: int) -> int:
    db_article = get_by_id(db, article_id)
    if db_article is None:
        return 0
    db.delete(db_article)
    db.commit()
    logger.debug("deleted article id=%s", article_id)
    return 1
