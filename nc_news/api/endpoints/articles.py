# nc_news/api/endpoints/articles.py

import logging
from typing import Any
from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session
from nc_news import crud, schemas
from nc_news.api import deps
from nc_news.api.validators import validate_article_id, validate_vote_increment
from nc_news.core.errors import NotFound

logger = logging.getLogger(__name__)

router = APIRouter()

# The two not-found messages differ on purpose; clients match on them.
ARTICLE_ID_NOT_FOUND_MSG = "article_id does not exist"
ARTICLE_NOT_FOUND_MSG = "Article not found"

@router.get("/{article_id}", response_model=schemas.ArticleResponse)
def read_article(article_id: str, db: Session = Depends(deps.get_db)):
    logger.info(f"Fetching article with ID: {article_id}")
    parsed_id = validate_article_id(article_id)
    article = crud.get_article_by_id(db, article_id=parsed_id)
    if article is None:
        raise NotFound(ARTICLE_ID_NOT_FOUND_MSG)
    return schemas.ArticleResponse(article=schemas.ArticleWithCommentCount.model_validate(article))

@router.patch("/{article_id}", response_model=schemas.Article)
def update_article_votes(
    article_id: str,
    payload: Any = Body(None),
    db: Session = Depends(deps.get_db)
):
    """Add ``inc_votes`` to an article's votes and return the updated row.

    The response is the bare article, without ``comment_count``.
    """
    logger.info(f"Received vote update for article ID: {article_id}")
    parsed_id = validate_article_id(article_id)
    vote = validate_vote_increment(payload)
    article = crud.increment_article_votes(db, article_id=parsed_id, inc_votes=vote.inc_votes)
    if article is None:
        raise NotFound(ARTICLE_NOT_FOUND_MSG)
    return schemas.Article.model_validate(article)
