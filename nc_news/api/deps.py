# nc_news/api/deps.py

from nc_news.db.session import get_db

__all__ = ["get_db"]
