import logging
from sqlalchemy import text
from sqlalchemy.orm import Session
from app.schemas.comment_schema import CommentCreate

LIST_COMMENTS = text("SELECT * FROM comments WHERE post_id = :post_id ORDER BY date DESC")
INSERT_COMMENT = text(
    "INSERT INTO comments (post_id, author, userId, date, content) "
    "VALUES (:post_id, :author, :userId, :date, :content)"
)


def list_comments(db: Session, post_id: int) -> list[dict]:
    rows = db.execute(LIST_COMMENTS, {"post_id": post_id}).mappings().all()
    return [dict(row) for row in rows]


def create_comment(db: Session, post_id: int, comment: CommentCreate) -> int:
    # The post isn't looked up first; comments on a missing post are stored as-is
    result = db.execute(INSERT_COMMENT, {
        "post_id": post_id,
        "author": comment.author,
        "userId": comment.user_id,
        "date": comment.date,
        "content": comment.content,
    })
    db.commit()
    logging.debug(f"Inserted comment {result.lastrowid} on post {post_id}")
    return result.lastrowid
