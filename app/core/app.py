from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from app.api.main import api_router
from app.services.timezone import timezone_service
from app.services.user_store import user_store
from app.services.youtube import youtube_service

from .config import settings
from .version import __version__


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events (startup/shutdown).
    """
    logger.info(f"{settings.APP_NAME} {__version__} starting ({settings.APP_ENV})")
    yield
    for name, closable in (("UserStore", user_store), ("Timezone", timezone_service), ("YouTube", youtube_service)):
        try:
            await closable.close()
            logger.info(f"{name} client closed")
        except Exception as exc:
            logger.warning(f"Failed to close {name} client: {exc}")


app = FastAPI(
    title=settings.APP_NAME,
    description="Member profile pages",
    version=__version__,
    lifespan=lifespan,
    docs_url=None if settings.APP_ENV != "development" else "/docs",
    redoc_url=None if settings.APP_ENV != "development" else "/redoc",
)

app.include_router(api_router)
