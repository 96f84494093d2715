import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException


def driver_message(exc: SQLAlchemyError) -> str:
    """The driver's own error text, without SQLAlchemy's statement/params decoration.

    MySQL drivers carry ``(errno, message)`` in ``args``; only the message is kept.
    """
    orig = getattr(exc, "orig", None)
    if orig is None:
        return str(exc)
    if orig.args:
        return str(orig.args[-1])
    return str(orig)


@contextmanager
def storage_errors(db: Session, action: str) -> Iterator[None]:
    """
    Turn any database failure inside the block into a 500.

    The raw driver message is passed through to the client, as the
    error body ``{"error": "..."}``.
    """
    try:
        yield
    except SQLAlchemyError as e:
        logging.error(f"Error {action}: {e}")
        db.rollback()
        raise HTTPException(status_code=500, detail=driver_message(e)) from e


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    messages = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        messages.append(f"{loc}: {err.get('msg')}")
    return JSONResponse(status_code=422, content={"error": "; ".join(messages)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
