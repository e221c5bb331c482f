from fastapi import Request

from caching.store import CacheStore
from locations.service import GeoService


def get_cache(request: Request) -> CacheStore:
    return request.app.state.cache


def get_service(request: Request) -> GeoService:
    return request.app.state.service
