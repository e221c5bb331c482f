from fastapi import APIRouter, Depends

from dependencies import get_service
from locations.levels import parse_level
from locations.service import GeoService
from responses import GeoJSONResponse, RawJSONResponse

router = APIRouter(tags=["Data"])


# ----------------------------
# GEOJSON BY LEVEL + NAME
# ----------------------------
@router.get("/geojson/{level}/{filename}", response_class=GeoJSONResponse)
def get_geojson(level: str, filename: str, service: GeoService = Depends(get_service)):
    return GeoJSONResponse(content=service.geojson(parse_level(level), filename))


# ----------------------------
# STRUCTURED DOCUMENTS
# ----------------------------
@router.get("/structured/{doc_type}", response_class=RawJSONResponse)
def get_structured(doc_type: str, service: GeoService = Depends(get_service)):
    return RawJSONResponse(content=service.structured_document(doc_type))
