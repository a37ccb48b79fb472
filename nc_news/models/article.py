# nc_news/models/article.py

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from nc_news.db.base_class import Base

class Article(Base):
    """Model for articles. comment_count is derived at read time, never stored."""
    __tablename__ = "articles"

    article_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    topic = Column(String, ForeignKey("topics.slug"), nullable=False)
    author = Column(String, ForeignKey("users.username"), nullable=False)
    body = Column(Text, nullable=False)
    votes = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    topic_ref = relationship("Topic", back_populates="articles")
    author_ref = relationship("User", back_populates="articles")
    comments = relationship("Comment", back_populates="article")
