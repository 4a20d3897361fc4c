"""Database operations for candidate articles."""

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from src.database.articles.models import Article
from src.database.base import delete_all, get_by_id, update_fields

logger = logging.getLogger(__name__)


def list_articles(session: Session) -> list[Article]:
    """Get all articles.

    :param session: Database session.
    :returns: Articles ordered by published date, newest first.
    """
    return session.query(Article).order_by(Article.published_date.desc()).all()


def get_article_by_id(session: Session, article_id: int) -> Article | None:
    """Get an article by ID.

    :param session: Database session.
    :param article_id: Article ID.
    :returns: The article or None if not found.
    """
    return get_by_id(session, Article, article_id)


def create_article(
    session: Session,
    title: str,
    source: str,
    url: str,
    published_date: datetime,
    content: str | None = None,
    selected: bool = False,
) -> Article:
    """Store a candidate article.

    :param session: Database session.
    :param title: Article title.
    :param source: Source label.
    :param url: Article URL.
    :param published_date: When the article was published.
    :param content: Optional body text.
    :param selected: Initial selection state.
    :returns: The created article.
    """
    article = Article(
        title=title,
        content=content,
        source=source,
        url=url,
        published_date=published_date,
        selected=selected,
    )
    session.add(article)
    session.flush()
    logger.debug(f"Created article: id={article.id}, source={source!r}")
    return article


def set_article_selected(session: Session, article_id: int, selected: bool) -> Article | None:
    """Set the selection flag of an article.

    :param session: Database session.
    :param article_id: Article ID.
    :param selected: New selection state.
    :returns: The updated article or None if not found.
    """
    return update_fields(session, Article, article_id, {"selected": selected})


def clear_articles(session: Session) -> int:
    """Delete every article.

    :param session: Database session.
    :returns: Number of articles deleted.
    """
    count = delete_all(session, Article)
    logger.info(f"Cleared {count} articles")
    return count
