# nc_news/crud/__init__.py

from .crud_topic import list_topics
from .crud_user import list_users
from .crud_article import get_article_by_id, increment_article_votes

__all__ = [
    "list_topics",
    "list_users",
    "get_article_by_id", "increment_article_votes",
]
