from pydantic import BaseModel, ConfigDict, Field, field_serializer
from typing import Any
from app.schemas.post_schema import format_date


class CommentCreate(BaseModel):
    author: Any = None
    user_id: Any = Field(None, alias="userId")
    date: Any = None
    content: Any = None


# Row shape returned by GET /posts/{id}/comments
class ResponseComment(BaseModel):
    id: int
    post_id: Any = None
    author: Any = None
    user_id: Any = Field(None, alias="userId")
    date: Any = None
    content: Any = None

    model_config = ConfigDict(populate_by_name=True)

    @field_serializer("date")
    def serialize_date(self, value: Any) -> Any:
        return format_date(value)


# Body returned after an insert; echoes the path id as ``postId``
class CreatedComment(BaseModel):
    id: int
    post_id: int = Field(alias="postId")
    author: Any = None
    user_id: Any = Field(None, alias="userId")
    date: Any = None
    content: Any = None

    model_config = ConfigDict(populate_by_name=True)
