"""Article database models and operations."""

from src.database.articles.models import Article
from src.database.articles.operations import (
    clear_articles,
    create_article,
    get_article_by_id,
    list_articles,
    set_article_selected,
)

__all__ = [
    "Article",
    "clear_articles",
    "create_article",
    "get_article_by_id",
    "list_articles",
    "set_article_selected",
]
