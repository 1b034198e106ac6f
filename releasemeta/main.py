from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from releasemeta.settings import settings
from releasemeta.logger import setup_logging
from releasemeta.constants import no_cache_headers
from releasemeta.engine import DEFAULT_TABLES

from releasemeta.routers import utils

setup_logging()
logger = logging.getLogger("releasemeta")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        'Started %s (%d channel tags, %d language aliases)',
        settings.app_version,
        len(DEFAULT_TABLES.channel_names),
        len(DEFAULT_TABLES.languages),
    )
    if not settings.tmdb_api_key:
        logger.info('TMDB_API_KEY not set, year backfill disabled')
    yield
    logger.info('Shutdown')


app = FastAPI(lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include Routers
app.include_router(utils.router)


# Health check
@app.get('/healthz')
async def healthz():
    return JSONResponse(content={"status": "ok", "version": settings.app_version}, headers=no_cache_headers)
