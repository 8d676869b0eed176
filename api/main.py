from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from core.config import Settings, configure_logging
from core.db import Database
from core.ids import UuidProvider
from posts import router as posts_router
from store import BlogStore, PostgresBlogStore
from store import schema
from users import router as users_router

logger = logging.getLogger(__name__)


def create_app(*, store: BlogStore | None = None, settings: Settings | None = None) -> FastAPI:
    """
    Build the API.

    With `store` given the app uses it as-is and never touches Postgres;
    otherwise the lifespan opens the pool, creates the tables and wires a
    `PostgresBlogStore` with random UUIDs.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        config = settings or Settings.from_env()
        configure_logging(config.log_level)

        if store is not None:
            app.state.store = store
            yield
            return

        database = Database(
            config.database_url,
            min_size=config.pool_min_size,
            max_size=config.pool_max_size,
            command_timeout=config.command_timeout,
        )
        await database.connect()
        try:
            await schema.ensure_tables(database)
            app.state.store = PostgresBlogStore(database, UuidProvider())
            yield
        finally:
            if config.drop_tables_on_shutdown:
                await schema.drop_tables(database)
            await database.close()

    app = FastAPI(lifespan=lifespan)
    app.include_router(users_router, tags=["users"])
    app.include_router(posts_router, tags=["posts"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    logger.info("http_server_listening host=%s port=%s", settings.listen_host, settings.listen_port)
    uvicorn.run(app, host=settings.listen_host, port=settings.listen_port)


if __name__ == "__main__":
    run()
