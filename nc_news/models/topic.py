# nc_news/models/topic.py

from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from nc_news.db.base_class import Base

class Topic(Base):
    __tablename__ = "topics"

    slug = Column(String, primary_key=True)
    description = Column(Text, nullable=False)
    articles = relationship("Article", back_populates="topic_ref")
