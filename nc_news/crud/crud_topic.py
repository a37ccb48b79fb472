# nc_news/crud/crud_topic.py

import logging
from typing import List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from nc_news import models
from nc_news.core.errors import InternalError

logger = logging.getLogger(__name__)

def list_topics(db: Session) -> List[models.Topic]:
    logger.info("Listing all topics")
    try:
        topics = db.query(models.Topic).all()
    except SQLAlchemyError as e:
        logger.error(f"Error listing topics: {str(e)}")
        raise InternalError() from e
    logger.info(f"Retrieved {len(topics)} topics")
    return topics
