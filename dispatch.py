"""Single-path entry point: "files/regency", "geojson/district/ABC_XYZ", ...

Segment 0 picks the handler, the rest are its arguments. Unknown first
segments return the index document.
"""

from caching.routes import cache_stats, clear_cache
from caching.store import CacheStore
from errors import BadUsage
from geodata.routes import get_geojson, get_structured
from locations.routes import get_districts, get_files, get_provinces, get_regencies, get_villages
from locations.levels import LEVEL_NAMES
from locations.service import GeoService
from responses import API_VERSION
from search.routes import autocomplete, search

ENDPOINTS = {
    "Basic Endpoints": {
        "/provinces": "List all provinces (filenames)",
        "/regencies": "List all regencies (filenames)",
        "/regencies/{province}": "List regencies in a province",
        "/districts": "List all districts (filenames)",
        "/districts/{regency}": "List districts in a regency",
        "/villages": "List all villages (filenames)",
        "/villages/{district}": "List villages in a district",
        "/files/{level}": f"List all filenames for a level ({LEVEL_NAMES})",
    },
    "Search & Autocomplete": {
        "/autocomplete/{level}/{prefix}": "Autocomplete filenames by prefix (case-insensitive)",
        "/search/{level}/{query}": "Search filenames by substring (case-insensitive)",
    },
    "Data Endpoints": {
        "/geojson/{level}/{filename}": "Fetch GeoJSON by level and filename (case-insensitive)",
        "/structured/administrative_structure": "Get full hierarchy JSON",
        "/structured/administrative_summary": "Get summary statistics JSON",
        "/structured/provinces_list": "Get provinces list JSON",
        "/structured/regencies_list": "Get regencies list JSON",
        "/structured/districts_list": "Get districts list JSON",
    },
    "Cache Management": {
        "/cache": "Get cache statistics",
        "/cache/clear": "Clear all cached data",
    },
}


def index() -> dict:
    return {
        "api_version": API_VERSION,
        "description": "Papua GeoJSON Collections API with caching",
        "endpoints": ENDPOINTS,
        "usage": "Call an endpoint path directly, or append ?q=ENDPOINT to the root URL, e.g. ?q=files/regency",
        "features": ["caching", "case-insensitive search", "autocomplete", "enhanced error handling"],
    }


def split_path(path: str) -> list[str]:
    parts = path.strip("/").split("/")
    return parts if parts[0] else [""]


def _arg(parts: list[str], i: int) -> str | None:
    return parts[i] if len(parts) > i else None


def route(path: str, service: GeoService, cache: CacheStore):
    """Run the handler selected by `path`; raises ApiError subclasses."""
    parts = split_path(path)
    head = parts[0]

    if head == "cache":
        if len(parts) == 1:
            return cache_stats(cache=cache)
        if parts[1] == "clear":
            return clear_cache(cache=cache)
        raise BadUsage("Usage: /cache or /cache/clear")

    if head == "provinces":
        return get_provinces(service=service)
    if head == "regencies":
        return get_regencies(_arg(parts, 1), service=service)
    if head == "districts":
        return get_districts(_arg(parts, 1), service=service)
    if head == "villages":
        return get_villages(_arg(parts, 1), service=service)

    if head == "files":
        if len(parts) < 2:
            raise BadUsage(f"Usage: /files/{{level}} where level is: {LEVEL_NAMES}")
        return get_files(parts[1], service=service)

    if head == "autocomplete":
        if len(parts) < 3:
            raise BadUsage("Usage: /autocomplete/{level}/{prefix}")
        return autocomplete(parts[1], parts[2], service=service)

    if head == "search":
        if len(parts) < 3:
            raise BadUsage("Usage: /search/{level}/{query}")
        return search(parts[1], parts[2], service=service)

    if head == "geojson":
        if len(parts) < 3:
            raise BadUsage("Usage: /geojson/{level}/{filename}")
        return get_geojson(parts[1], parts[2], service=service)

    if head == "structured":
        if len(parts) < 2:
            raise BadUsage("Usage: /structured/{type}")
        return get_structured(parts[1], service=service)

    return index()
