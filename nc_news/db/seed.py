# nc_news/db/seed.py

import logging
from sqlalchemy.orm import Session

from nc_news.db.base import Base, Topic, User, Article, Comment

logger = logging.getLogger(__name__)


def seed(db: Session, data: dict) -> None:
    """Drop and recreate every table, then load ``data``.

    ``data`` holds ``topics``, ``users``, ``articles`` and ``comments`` lists.
    Articles and comments are numbered from 1 in list order.
    """
    connection = db.connection()
    Base.metadata.drop_all(bind=connection)
    Base.metadata.create_all(bind=connection)
    logger.info("Tables dropped and recreated")

    db.add_all(Topic(**topic) for topic in data["topics"])
    db.add_all(User(**user) for user in data["users"])
    db.flush()

    db.add_all(
        Article(article_id=article_id, **article)
        for article_id, article in enumerate(data["articles"], start=1)
    )
    db.flush()

    db.add_all(
        Comment(comment_id=comment_id, **comment)
        for comment_id, comment in enumerate(data["comments"], start=1)
    )
    db.commit()
    logger.info(
        f"Seeded {len(data['topics'])} topics, {len(data['users'])} users, "
        f"{len(data['articles'])} articles and {len(data['comments'])} comments"
    )


def seed_if_empty(db: Session, data: dict) -> bool:
    logger.info("Checking if the database needs to be seeded")
    if db.query(Topic).count() == 0:
        seed(db, data)
        return True
    logger.info("Topics already exist. No need to seed.")
    return False


if __name__ == "__main__":
    from nc_news.core.config import settings
    from nc_news.db.data.test_data import test_data
    from nc_news.db.session import create_db_engine, create_session_factory

    logging.basicConfig(level=settings.LOG_LEVEL)
    engine = create_db_engine(settings.DATABASE_URL)
    with create_session_factory(engine)() as db:
        seed(db, test_data)
    engine.dispose()
