"""API endpoints for candidate articles."""

import logging

from fastapi import APIRouter, status

from src.api.articles.models import ArticleSelectionRequest
from src.api.dependencies import StorageDep, not_found
from src.storage.models import Article, ArticleCreate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.get("", response_model=list[Article], summary="List articles")
def list_articles(storage: StorageDep) -> list[Article]:
    """List all articles, newest published first."""
    return storage.get_articles()


@router.post(
    "",
    response_model=Article,
    status_code=status.HTTP_201_CREATED,
    summary="Create article",
)
def create_article(request: ArticleCreate, storage: StorageDep) -> Article:
    """Store a candidate article collected from a feed."""
    return storage.create_article(request)


@router.patch("/{article_id}/selection", response_model=Article, summary="Select article")
def update_article_selection(
    article_id: int,
    request: ArticleSelectionRequest,
    storage: StorageDep,
) -> Article:
    """Select or deselect an article for the next newsletter."""
    article = storage.update_article_selection(article_id, request.selected)
    if article is None:
        raise not_found("Article", article_id)
    logger.info(f"Article selection: id={article_id}, selected={request.selected}")
    return article


@router.delete("", status_code=status.HTTP_204_NO_CONTENT, summary="Clear articles")
def clear_articles(storage: StorageDep) -> None:
    """Delete every article."""
    storage.clear_articles()
