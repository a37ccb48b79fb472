# nc_news/api/endpoints/users.py

import logging
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from nc_news import crud, schemas
from nc_news.api import deps

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=List[schemas.User])
def read_users(db: Session = Depends(deps.get_db)):
    """List every user as a bare array, unlike the wrapped topics response."""
    logger.info("Received request to list all users")
    users = crud.list_users(db)
    logger.info(f"Returning {len(users)} users")
    return [schemas.User.model_validate(user) for user in users]
