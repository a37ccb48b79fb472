# nc_news/schemas/topic.py
from typing import List
from pydantic import BaseModel

class Topic(BaseModel):
    slug: str
    description: str

    class Config:
        from_attributes = True


class TopicList(BaseModel):
    topics: List[Topic]
