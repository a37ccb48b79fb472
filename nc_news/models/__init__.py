# nc_news/models/__init__.py
from nc_news.models.topic import Topic
from nc_news.models.user import User
from nc_news.models.article import Article
from nc_news.models.comment import Comment

__all__ = [
    "Topic",
    "User",
    "Article",
    "Comment",
]
