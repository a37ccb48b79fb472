# nc_news/schemas/user.py
from pydantic import BaseModel

class User(BaseModel):
    username: str
    name: str
    avatar_url: str

    class Config:
        from_attributes = True
