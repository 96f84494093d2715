import logging
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.config import settings

Base = declarative_base()

# One engine (and its connection pool) per process, shared by every request
engine = create_engine(settings.database_url, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class DatabaseUnavailableError(RuntimeError):
    """Raised at startup when the database can't be reached and the policy is ``exit``."""


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError:
        db.rollback()
        raise
    finally:
        db.close()


def check_connection(bind: Engine, policy: str = "continue") -> bool:
    """
    Probe the database once.

    Returns True when a connection could be opened. On failure the error is
    logged; with ``policy="exit"`` a DatabaseUnavailableError is raised,
    otherwise False is returned and the app keeps serving (requests then
    fail one by one with a 500).
    """
    try:
        with bind.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logging.error(f"Error connecting to the database: {e}")
        if policy == "exit":
            raise DatabaseUnavailableError(str(e)) from e
        return False
    logging.info("Connected to the database")
    return True
