# nc_news/crud/crud_article.py

import logging
from typing import Optional
from sqlalchemy import func, update
from sqlalchemy.exc import DataError, SQLAlchemyError
from sqlalchemy.orm import Session
from nc_news.core.errors import BadRequest, InternalError
from nc_news.models.article import Article
from nc_news.models.comment import Comment

logger = logging.getLogger(__name__)

def get_article_by_id(db: Session, article_id: int) -> Optional[Article]:
    """Get a single article with its comment count attached as ``comment_count``."""
    try:
        row = db.query(Article, func.count(Comment.comment_id).label("comment_count"))\
                .outerjoin(Comment, Comment.article_id == Article.article_id)\
                .filter(Article.article_id == article_id)\
                .group_by(Article.article_id)\
                .first()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching article {article_id}: {str(e)}")
        raise InternalError() from e

    if row is None:
        logger.warning(f"Article with ID {article_id} not found")
        return None

    article, comment_count = row
    article.comment_count = comment_count
    return article

def increment_article_votes(db: Session, article_id: int, inc_votes: int) -> Optional[Article]:
    """Add inc_votes to the article's votes in one UPDATE ... RETURNING statement.

    Returns None when no article has that id. Nothing is written in that case.
    """
    stmt = update(Article)\
        .where(Article.article_id == article_id)\
        .values(votes=Article.votes + inc_votes)\
        .returning(Article)
    try:
        article = db.execute(stmt).scalar_one_or_none()
        db.commit()
    except DataError as e:
        # The new total does not fit the votes column (PostgreSQL "integer out of range").
        logger.warning(f"Votes for article {article_id} out of range after adding {inc_votes}")
        db.rollback()
        raise BadRequest(f"votes out of range for article {article_id}") from e
    except SQLAlchemyError as e:
        logger.error(f"Error updating votes for article {article_id}: {str(e)}")
        db.rollback()
        raise InternalError() from e

    if article is None:
        logger.warning(f"Article with ID {article_id} not found, no votes changed")
    else:
        logger.info(f"Article {article_id} votes changed by {inc_votes} to {article.votes}")
    return article
