from sqlalchemy.exc import OperationalError, SQLAlchemyError

from app.core.errors import driver_message


def test_mysql_error_keeps_only_the_message():
    exc = OperationalError("INSERT INTO posts ...", {}, Exception(1048, "Column 'title' cannot be null"))

    assert driver_message(exc) == "Column 'title' cannot be null"


def test_sqlite_error_message():
    exc = OperationalError("SELECT * FROM posts", {}, Exception("no such table: posts"))

    assert driver_message(exc) == "no such table: posts"


def test_error_without_driver_exception():
    assert driver_message(SQLAlchemyError("boom")) == "boom"
