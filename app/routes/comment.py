from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.core.errors import storage_errors
from app.db.session import get_db
from app.schemas.comment_schema import CommentCreate, CreatedComment, ResponseComment
from app.services import comment as comment_service

router = APIRouter(prefix="/posts/{post_id}/comments", tags=["comments"])

# Get the comments of a post, newest first. An unknown post just has none.

@router.get("", response_model=list[ResponseComment])

def list_comments(post_id: int, db: Session = Depends(get_db)):
    with storage_errors(db, "fetching comments"):
        return comment_service.list_comments(db, post_id)

# Comment on a post. The post isn't checked for existence.

@router.post("", response_model=CreatedComment, status_code=status.HTTP_201_CREATED)

def create_comment(post_id: int, comment: CommentCreate, db: Session = Depends(get_db)):
    with storage_errors(db, "inserting new comment"):
        comment_id = comment_service.create_comment(db, post_id, comment)
    return CreatedComment(id=comment_id, post_id=post_id, **comment.model_dump())
