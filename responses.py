import json
from typing import Any

from fastapi.responses import JSONResponse, Response

API_VERSION = "2.0"


class PrettyJSONResponse(JSONResponse):
    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=4).encode("utf-8")


class GeoJSONResponse(Response):
    media_type = "application/geo+json"


class RawJSONResponse(Response):
    """Pre-serialized JSON bytes, sent unchanged."""

    media_type = "application/json"
