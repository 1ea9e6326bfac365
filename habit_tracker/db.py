import logging
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from . import config
from . import models  # noqa: F401  registers tables on SQLModel.metadata

logger = logging.getLogger(__name__)


# ----- DB setup -----
def build_engine(database_url: Optional[str] = None, echo: bool = config.SQL_ECHO) -> Engine:
    url = database_url or config.DATABASE_URL
    connect_args = {}
    if url.startswith("sqlite"):
        # requests are served from the threadpool
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=echo, connect_args=connect_args)


def create_db_and_tables(engine: Engine) -> None:
    SQLModel.metadata.create_all(engine)
    logger.info("Database tables ready (%s)", engine.url.render_as_string(hide_password=True))


def get_session(request: Request) -> Iterator[Session]:
    """Yield a session bound to the engine of the running app."""
    with Session(request.app.state.engine) as session:
        yield session
