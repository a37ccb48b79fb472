# nc_news/api/api.py

import logging
from fastapi import APIRouter
from nc_news.api.endpoints import articles, topics, users

# Set up logging
logger = logging.getLogger(__name__)

api_router = APIRouter()

api_router.include_router(topics.router, prefix="/topics", tags=["topics"])
api_router.include_router(articles.router, prefix="/articles", tags=["articles"])
api_router.include_router(users.router, prefix="/users", tags=["users"])

logger.info(f"API routes configured: {[getattr(route, 'path', route) for route in api_router.routes]}")
