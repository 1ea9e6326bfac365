import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from . import config
from .db import build_engine, create_db_and_tables
from .logging_config import setup_logging
from .routes import router

logger = logging.getLogger(__name__)


# ----- App -----
def create_app(engine: Optional[Engine] = None) -> FastAPI:
    """Build the API around ``engine`` (defaults to ``DATABASE_URL``)."""
    app = FastAPI(title="Habit Tracker API")
    app.state.engine = engine if engine is not None else build_engine()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)

    @app.on_event("startup")
    def on_startup():
        setup_logging()
        create_db_and_tables(app.state.engine)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT)
