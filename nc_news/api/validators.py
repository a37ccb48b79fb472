# nc_news/api/validators.py
"""
Input checks run before any data access.

Every failure is a BadRequest; whether an entity exists is decided later by
the handler, as a NotFound.
"""

import re
from typing import Any

from pydantic import ValidationError

from nc_news.core.errors import BadRequest
from nc_news.schemas.article import INT32_MAX, INT32_MIN, VoteIncrement


ARTICLE_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

MIN_ARTICLE_ID = INT32_MIN
MAX_ARTICLE_ID = INT32_MAX


def validate_article_id(raw: str) -> int:
    """Parse a path segment as a base-10 article id.

    Only ASCII digits with an optional sign are accepted; ``int()`` alone would
    let through whitespace, underscores and non-ASCII digits.
    """
    if not isinstance(raw, str) or not ARTICLE_ID_PATTERN.fullmatch(raw):
        raise BadRequest(f"article_id is not an integer: {raw!r}")
    article_id = int(raw)
    if not MIN_ARTICLE_ID <= article_id <= MAX_ARTICLE_ID:
        raise BadRequest(f"article_id out of range: {raw}")
    return article_id


def validate_vote_increment(body: Any) -> VoteIncrement:
    """Check a PATCH payload carries an integer ``inc_votes``.

    Extra keys are tolerated and dropped.
    """
    if not isinstance(body, dict):
        raise BadRequest("request body must be a JSON object")
    try:
        return VoteIncrement.model_validate(body)
    except ValidationError as e:
        raise BadRequest(f"invalid inc_votes: {e.error_count()} error(s)") from e
