from sqlalchemy import Column, Integer, String, DateTime, Text
from app.db.session import Base


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    author = Column(String(255), nullable=False)
    user_id = Column("userId", Integer)
    date = Column(DateTime, index=True)
