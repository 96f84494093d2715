from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL
from typing import List, Literal, Optional


class Settings(BaseSettings):
    APP_NAME: str = "Posts API"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    DB_HOST: str = "localhost"
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DB_NAME: str = "blog"
    # Full SQLAlchemy URL, takes precedence over the DB_* parts when set
    DATABASE_URL: Optional[str] = None

    # What to do when the database can't be reached at startup
    DB_CONNECT_FAILURE_POLICY: Literal["continue", "exit"] = "continue"

    # CORS: any origin by default (can be overridden via .env)
    ALLOWED_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"  # Load environment variables from the .env file

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return URL.create(
            "mysql+pymysql",
            username=self.DB_USER,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            database=self.DB_NAME,
        ).render_as_string(hide_password=False)


settings = Settings()
