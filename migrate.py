import logging

from app.config import settings
from app.db.session import engine, Base
from app.models.post import Post  # noqa: F401 - registers the posts table
from app.models.comment import Comment  # noqa: F401 - registers the comments table


def run_migrations():
    """Create any missing tables. Existing tables are left untouched."""
    logging.info(f"Creating tables on {engine.url.render_as_string(hide_password=True)}...")
    Base.metadata.create_all(bind=engine)
    logging.info(f"Tables ready: {', '.join(sorted(Base.metadata.tables))}")


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    run_migrations()
