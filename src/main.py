from fastapi import FastAPI
from pydantic_settings import BaseSettings
from contextlib import asynccontextmanager
import logging

from routers.station import router as station_router
from schemas import AppHealthOK
from core.config_loader import config_loader
from core.services.report_store import report_store

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    app_name: str = "Weather Station Backend"
    debug: bool = False


settings = Settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the active station configuration and make sure the storage directory exists."""
    config = config_loader.get_config()
    logger.info(
        "Station '%s' rendering timestamps in %s, report at %s",
        config.location, config.timezone, report_store.path
    )
    try:
        report_store.path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        # Ingests will fail with a 500 until the directory is writable
        logger.error(f"Cannot create storage directory {report_store.path.parent}: {e}")

    try:
        yield
    finally:
        logger.info("Shutting down")


app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)


@app.get("/health", tags=["meta"], response_model=AppHealthOK)
async def healthcheck() -> AppHealthOK:
    return AppHealthOK(status="ok", app=settings.app_name)


# sensor ingest and status page share the site root
app.include_router(station_router)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
