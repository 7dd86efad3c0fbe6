import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from konigsberg.core.config import settings
from konigsberg.core.database import Base, SessionLocal, engine
from konigsberg.routers import game_routers, level_routers
from konigsberg.services import LevelServices
from utils.logger_config import configure_logging

configure_logging(settings.LOG_LEVEL, settings.LOG_FILE)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create database tables
    Base.metadata.create_all(bind=engine)
    if settings.SEED_LEVELS:
        db = SessionLocal()
        try:
            LevelServices(db).seed_levels()
        finally:
            db.close()
    logger.info("Königsberg API ready")
    yield


# create FastAPI
app = FastAPI(title="Königsberg Bridges API", version="1.0", lifespan=lifespan)

# get routers
app.include_router(level_routers.router, prefix="/levels", tags=["Levels"])
app.include_router(game_routers.router, prefix="/games", tags=["Games"])


@app.get("/health")
async def health():
    return {"status": "ok"}
