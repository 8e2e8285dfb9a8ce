from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from hypercorn.asyncio import serve
from hypercorn.config import Config

from ...config import AppSettings, get_settings
from ...data import ResourceStore
from ..calendar import CalendarService
from ..context import ServiceContext
from ..venues import VenueService
from .errors import register_error_handlers
from .middleware import enforce_media_type, log_requests, recover_errors
from .routes import router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    logger.info("Closing resource store")
    app.state.context.close()


def create_app(settings: Optional[AppSettings] = None, store: Optional[ResourceStore] = None) -> FastAPI:
    """Build the API with one store handle shared by every request."""

    settings = settings or get_settings()
    context = ServiceContext(settings=settings, store=store)

    app = FastAPI(title="Venue Calendar API", version="0.1.0", lifespan=_lifespan)
    app.state.context = context
    app.state.venues = VenueService(context)
    app.state.calendar = CalendarService(context)

    register_error_handlers(app)
    # Added innermost first; the last middleware registered runs outermost.
    if settings.server.enforce_media_type:
        app.middleware("http")(enforce_media_type)
    app.middleware("http")(recover_errors)
    app.middleware("http")(log_requests)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.server.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)
    return app


async def _serve(app: FastAPI, config: Config) -> None:
    await serve(app, config)


def run_local_server(host: Optional[str] = None, port: Optional[int] = None) -> None:
    settings = get_settings()
    config = Config()
    config.bind = [f"{host or settings.server.host}:{port or settings.server.port}"]
    app = create_app(settings)
    logger.info("Listening at %s", config.bind[0])
    asyncio.run(_serve(app, config))
