from .topic import Topic, TopicList
from .user import User
from .article import Article, ArticleWithCommentCount, ArticleResponse, VoteIncrement

__all__ = [
    "Topic", "TopicList",
    "User",
    "Article", "ArticleWithCommentCount", "ArticleResponse", "VoteIncrement",
]
