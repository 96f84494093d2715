from sqlalchemy import Column, Integer, String, DateTime, Text
from app.db.session import Base


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    # Points at posts.id, but no foreign key: orphaned comments are allowed
    post_id = Column(Integer, index=True)
    author = Column(String(255), nullable=False)
    user_id = Column("userId", Integer)
    date = Column(DateTime, index=True)
    content = Column(Text, nullable=False)
