import os
from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import create_engine

DEFAULT_DATABASE_URL = "sqlite:///spells.db"


def build_database_url() -> str:
    """Resolve the database URL from the environment.

    `DATABASE_URL` wins; otherwise a Postgres URL is assembled from the
    `POSTGRES_*` variables when `POSTGRES_HOST` is set; otherwise a local
    SQLite file is used.
    """
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    if os.getenv("POSTGRES_HOST"):
        db_user = os.environ["POSTGRES_USER"]
        db_password = os.environ["POSTGRES_PASSWORD"]
        db_name = os.environ["POSTGRES_DB"]
        db_host = os.environ["POSTGRES_HOST"]
        db_port = os.getenv("POSTGRES_PORT", "5432")
        return f"postgresql+psycopg://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"
    return DEFAULT_DATABASE_URL


def make_engine(database_url: Optional[str] = None) -> Engine:
    return create_engine(database_url or build_database_url(), echo=False)
