import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from caching.routes import router as cache_router
from caching.store import CacheStore
from config import Settings, load_settings
from dispatch import index, route
from errors import ApiError, api_error_handler
from geodata.routes import router as geodata_router
from locations.routes import router as locations_router
from locations.service import GeoService
from responses import API_VERSION, PrettyJSONResponse
from search.routes import router as search_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    logging.basicConfig(level=settings.log_level)

    cache = CacheStore(settings.cache_dir, ttl=settings.cache_ttl, enabled=settings.cache_enabled)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        cache.ensure_dir()
        yield

    app = FastAPI(
        title="Papua GeoJSON Collections API",
        version=API_VERSION,
        default_response_class=PrettyJSONResponse,
        lifespan=lifespan,
    )
    app.state.cache = cache
    app.state.service = GeoService(settings, cache)

    # ---- CORS CONFIG ----
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_version_header(request: Request, call_next):
        response = await call_next(request)
        response.headers["X-API-Version"] = API_VERSION
        return response

    app.add_exception_handler(ApiError, api_error_handler)

    # ---- API ROUTERS ----
    app.include_router(cache_router)
    app.include_router(locations_router)
    app.include_router(search_router)
    app.include_router(geodata_router)

    # ---- INDEX / LEGACY ?q= ENTRY POINT ----
    @app.get("/")
    def root(request: Request, q: str = ""):
        if not q:
            return index()
        return route(q, request.app.state.service, request.app.state.cache)

    # Registered last so the explicit routes above win.
    @app.get("/{path:path}")
    def fallback(path: str, request: Request):
        return route(path, request.app.state.service, request.app.state.cache)

    logger.info("Serving datasets from %s (cache: %s, ttl %ss)", settings.data_dir, settings.cache_dir, settings.cache_ttl)
    return app


app = create_app()
