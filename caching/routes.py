from fastapi import APIRouter, Depends

from caching.store import CacheStore
from dependencies import get_cache

router = APIRouter(prefix="/cache", tags=["Cache"])


@router.get("")
def cache_stats(cache: CacheStore = Depends(get_cache)):
    return cache.stats()


@router.get("/clear")
def clear_cache(cache: CacheStore = Depends(get_cache)):
    deleted = cache.clear()
    return {"message": "Cache cleared", "files_deleted": deleted}
