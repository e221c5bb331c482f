from fastapi import APIRouter, Depends

from dependencies import get_service
from locations.levels import parse_level
from locations.service import GeoService

router = APIRouter(tags=["Search"])


# ----------------------------
# AUTOCOMPLETE BY PREFIX
# ----------------------------
@router.get("/autocomplete/{level}/{prefix}")
def autocomplete(level: str, prefix: str, service: GeoService = Depends(get_service)):
    return service.autocomplete(parse_level(level), prefix)


# ----------------------------
# SEARCH BY SUBSTRING
# ----------------------------
@router.get("/search/{level}/{query}")
def search(level: str, query: str, service: GeoService = Depends(get_service)):
    return service.search(parse_level(level), query)
