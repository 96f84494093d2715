import logging
from sqlalchemy import text
from sqlalchemy.orm import Session
from app.schemas.post_schema import PostCreate, PostUpdate

# One parameterized statement per operation; values are always bound,
# never formatted into the SQL text.

LIST_POSTS = text("SELECT * FROM posts ORDER BY date DESC")
GET_POST = text("SELECT * FROM posts WHERE id = :id")
INSERT_POST = text(
    "INSERT INTO posts (title, content, author, userId, date) "
    "VALUES (:title, :content, :author, :userId, :date)"
)
UPDATE_POST = text(
    "UPDATE posts SET title = :title, content = :content, date = :date WHERE id = :id"
)
DELETE_POST = text("DELETE FROM posts WHERE id = :id")


def list_posts(db: Session) -> list[dict]:
    rows = db.execute(LIST_POSTS).mappings().all()
    return [dict(row) for row in rows]


def get_post(db: Session, post_id: int) -> dict | None:
    row = db.execute(GET_POST, {"id": post_id}).mappings().first()
    return dict(row) if row is not None else None


def create_post(db: Session, post: PostCreate) -> int:
    result = db.execute(INSERT_POST, {
        "title": post.title,
        "content": post.content,
        "author": post.author,
        "userId": post.user_id,
        "date": post.date,
    })
    db.commit()
    logging.debug(f"Inserted post {result.lastrowid}")
    return result.lastrowid


def update_post(db: Session, post_id: int, post: PostUpdate) -> int:
    """Returns the number of rows changed; 0 when the post doesn't exist."""
    result = db.execute(UPDATE_POST, {
        "title": post.title,
        "content": post.content,
        "date": post.date,
        "id": post_id,
    })
    db.commit()
    logging.debug(f"Updated post {post_id}: {result.rowcount} row(s) affected")
    return result.rowcount


def delete_post(db: Session, post_id: int) -> int:
    result = db.execute(DELETE_POST, {"id": post_id})
    db.commit()
    logging.debug(f"Deleted post {post_id}: {result.rowcount} row(s) affected")
    return result.rowcount
