# locations/routes.py
from fastapi import APIRouter, Depends

from dependencies import get_service
from locations.levels import Level, parse_level
from locations.service import GeoService

router = APIRouter(tags=["Locations"])


# -----------------------------
# GET PROVINCES
# -----------------------------
@router.get("/provinces")
def get_provinces(service: GeoService = Depends(get_service)):
    return service.list_names(Level.PROVINCE)


# -----------------------------
# GET REGENCIES (BY PROVINCE)
# -----------------------------
@router.get("/regencies")
@router.get("/regencies/{province}")
def get_regencies(province: str | None = None, service: GeoService = Depends(get_service)):
    return service.list_children("regencies", Level.REGENCY, province)


# -----------------------------
# GET DISTRICTS (BY REGENCY)
# -----------------------------
@router.get("/districts")
@router.get("/districts/{regency}")
def get_districts(regency: str | None = None, service: GeoService = Depends(get_service)):
    return service.list_children("districts", Level.DISTRICT, regency)


# -----------------------------
# GET VILLAGES (BY DISTRICT)
# -----------------------------
@router.get("/villages")
@router.get("/villages/{district}")
def get_villages(district: str | None = None, service: GeoService = Depends(get_service)):
    return service.list_children("villages", Level.VILLAGE, district)


# -----------------------------
# GET FILES BY LEVEL
# -----------------------------
@router.get("/files/{level}")
def get_files(level: str, service: GeoService = Depends(get_service)):
    return service.list_names(parse_level(level))
