import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.config import settings
from app.core.errors import register_exception_handlers
from app.db.session import check_connection, engine
from app.routes import comment, post

logging.basicConfig(level=settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Raises DatabaseUnavailableError (aborting startup) only under the "exit" policy
    check_connection(engine, settings.DB_CONNECT_FAILURE_POLICY)
    yield
    engine.dispose()


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# Cross-origin requests are allowed from any origin unless configured otherwise
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(post.router)
app.include_router(comment.router)


if __name__ == "__main__":
    logging.info(f"Server is running on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
