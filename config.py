import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from locations.levels import LEVEL_DIRS, STRUCTURED_DIR, Level

BASE_DIR = Path(__file__).resolve().parent

DEFAULT_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:5173",
)


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    data_dir: Path
    cache_dir: Path
    cache_ttl: int = 3600
    cache_enabled: bool = True
    geojson_ext: str = "geojson"
    cors_origins: tuple[str, ...] = DEFAULT_ORIGINS
    log_level: str = "INFO"

    def level_dir(self, level: Level) -> Path:
        return self.data_dir / LEVEL_DIRS[level]

    @property
    def structured_dir(self) -> Path:
        return self.data_dir / STRUCTURED_DIR


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if not raw:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    load_dotenv()

    data_dir = Path(os.getenv("GEO_DATA_DIR") or BASE_DIR)
    cache_dir = Path(os.getenv("GEO_CACHE_DIR") or data_dir / "cache")

    origins = list(DEFAULT_ORIGINS)
    extra = os.getenv("CORS_ORIGINS", "")
    origins.extend(o.strip() for o in extra.split(",") if o.strip())

    frontend_url = os.getenv("FRONTEND_URL")
    if frontend_url:
        origins.append(frontend_url)

    return Settings(
        data_dir=data_dir,
        cache_dir=cache_dir,
        cache_ttl=int(os.getenv("GEO_CACHE_TTL") or 3600),
        cache_enabled=_env_bool("GEO_CACHE_ENABLED", True),
        cors_origins=tuple(origins),
        log_level=os.getenv("LOG_LEVEL") or "INFO",
    )
