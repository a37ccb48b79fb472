# nc_news/models/user.py

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from nc_news.db.base_class import Base

class User(Base):
    __tablename__ = "users"

    username = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    avatar_url = Column(String, nullable=False)
    articles = relationship("Article", back_populates="author_ref")
