import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from redis.asyncio import Redis

from app.api.router import api_router
from app.core.settings import get_settings

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.redis = Redis.from_url(settings.redis_url)
    app.state.sms_http = httpx.AsyncClient(timeout=settings.sms_timeout_seconds)
    app.state.users_http = httpx.AsyncClient(timeout=settings.user_service_timeout_seconds)
    logger.info("Started %s (sms_mode=%s)", settings.app_name, settings.sms_mode)
    try:
        yield
    finally:
        await app.state.users_http.aclose()
        await app.state.sms_http.aclose()
        await app.state.redis.aclose()


app = FastAPI(title=settings.app_name, lifespan=lifespan)

origins = [o.strip() for o in settings.allow_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.api_prefix)
