# nc_news/schemas/article.py

from datetime import datetime, timezone
from typing import Annotated
from pydantic import BaseModel, Field, StrictInt, field_serializer

# article_id and votes are 32-bit INTEGER columns.
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


def format_timestamp(dt: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. 2020-07-09T20:11:00.000Z.

    SQLite hands back naive datetimes; those are taken to be UTC already.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    else:
        dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


class ArticleBase(BaseModel):
    article_id: int
    title: str
    topic: str
    author: str
    body: str
    created_at: datetime
    votes: int

    @field_serializer("created_at")
    def serialize_created_at(self, created_at: datetime) -> str:
        return format_timestamp(created_at)

    class Config:
        from_attributes = True


class Article(ArticleBase):
    """Shape returned after a vote update: the stored row only."""
    pass


class ArticleWithCommentCount(ArticleBase):
    """Shape returned by a lookup: the stored row plus the derived comment count."""
    comment_count: int


class ArticleResponse(BaseModel):
    article: ArticleWithCommentCount


class VoteIncrement(BaseModel):
    """PATCH /api/articles/{article_id} payload. Unknown keys are ignored."""
    inc_votes: Annotated[StrictInt, Field(ge=INT32_MIN, le=INT32_MAX)]
