# nc_news/db/base.py
# Import every model so Base.metadata knows all tables before create_all/drop_all.

from nc_news.db.base_class import Base
from nc_news.models.topic import Topic
from nc_news.models.user import User
from nc_news.models.article import Article
from nc_news.models.comment import Comment

__all__ = ["Base", "Topic", "User", "Article", "Comment"]
