# nc_news/crud/crud_user.py

import logging
from typing import List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from nc_news.core.errors import InternalError
from nc_news.models.user import User

logger = logging.getLogger(__name__)

def list_users(db: Session) -> List[User]:
    logger.info("Listing all users")
    try:
        users = db.query(User).all()
    except SQLAlchemyError as e:
        logger.error(f"Error listing users: {str(e)}")
        raise InternalError() from e
    logger.info(f"Retrieved {len(users)} users")
    return users
