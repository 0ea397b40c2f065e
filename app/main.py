# app/main.py
from fastapi import FastAPI
import uvicorn

from app.api import api_router
from app.api.errors import register_exception_handlers
from app.api.routers import health
from app.data.database import Database
from app.utils.logging import get_logger, setup_logging
from app.utils.settings import PORT

logger = get_logger(__name__)


def create_app(database_url: str | None = None) -> FastAPI:
    setup_logging()

    app = FastAPI(
        title="QKart",
        version="1.0.0",
    )

    # polaczenie z baza per instancja aplikacji (testy podaja wlasny url)
    database = Database(database_url)
    database.create_all()
    app.state.database = database

    register_exception_handlers(app)

    # routery
    app.include_router(health.router)
    app.include_router(api_router)

    logger.info("Aplikacja QKart utworzona")
    return app


if __name__ == "__main__":
    uvicorn.run(create_app(), host="0.0.0.0", port=PORT)
