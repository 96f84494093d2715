from pydantic import BaseModel, ConfigDict, Field, field_serializer
from datetime import datetime
from typing import Any

# Body fields are untyped and optional: values are bound to the statement
# exactly as sent, missing ones as NULL, and the database decides.


def format_date(value: Any) -> Any:
    """Render a DATETIME the way it was most likely submitted.

    Midnight comes back as a plain ``YYYY-MM-DD``, anything else as ISO-8601.
    Values the driver returned as strings are left alone.
    """
    if not isinstance(value, datetime):
        return value
    if value.time() == datetime.min.time() and value.tzinfo is None:
        return value.date().isoformat()
    return value.isoformat()


class PostBase(BaseModel):
    title: Any = None
    content: Any = None
    date: Any = None

class PostCreate(PostBase):
    author: Any = None
    user_id: Any = Field(None, alias="userId")

class PostUpdate(PostBase):
    pass

class ResponsePost(BaseModel):
    id: int
    title: Any = None
    content: Any = None
    author: Any = None
    user_id: Any = Field(None, alias="userId")
    date: Any = None

    model_config = ConfigDict(populate_by_name=True)

    @field_serializer("date")
    def serialize_date(self, value: Any) -> Any:
        return format_date(value)

class MessageResponse(BaseModel):
    message: str
