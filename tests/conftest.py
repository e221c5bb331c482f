import pytest
from fastapi.testclient import TestClient

from caching.store import CacheStore
from config import Settings
from locations.levels import LEVEL_DIRS, STRUCTURED_DIR, Level
from locations.service import GeoService

DATASET = {
    Level.PROVINCE: ["Papua", "Papua Barat", "Papua Tengah"],
    Level.REGENCY: ["JAYAPURA__PAPUA", "KEEROM__PAPUA", "SORONG__PAPUA BARAT", "Nabire__papua tengah"],
    Level.DISTRICT: ["ABEPURA_JAYAPURA", "SENTANI_JAYAPURA", "AIMAS_SORONG"],
    Level.VILLAGE: ["KLAMALU_AIMAS", "SORONG KOTA_AIMAS", "ABEPANTAI_ABEPURA"],
}

SUMMARY_JSON = '{"provinsi": 3, "nama": "Papua Pegunungan – Wamena"}'


def geojson_body(name: str) -> str:
    return '{"type": "FeatureCollection", "name": "%s", "features": []}' % name


@pytest.fixture
def data_dir(tmp_path):
    root = tmp_path / "data"
    for level, names in DATASET.items():
        level_dir = root / LEVEL_DIRS[level]
        level_dir.mkdir(parents=True)
        for name in names:
            (level_dir / f"{name}.geojson").write_text(geojson_body(name), encoding="utf-8")

    # noise that must never show up in listings
    province_dir = root / LEVEL_DIRS[Level.PROVINCE]
    (province_dir / "README.txt").write_text("not a dataset")
    (province_dir / ".hidden.geojson").write_text("{}")
    (province_dir / "folder.geojson").mkdir()

    structured = root / STRUCTURED_DIR
    structured.mkdir()
    (structured / "papua_administrative_summary.json").write_text(SUMMARY_JSON, encoding="utf-8")
    (structured / "papua_provinces_list.json").write_text('["Papua"]', encoding="utf-8")
    return root


@pytest.fixture
def settings(data_dir, tmp_path):
    return Settings(data_dir=data_dir, cache_dir=tmp_path / "cache", cors_origins=("http://localhost:3000",))


@pytest.fixture
def cache(settings):
    store = CacheStore(settings.cache_dir, ttl=settings.cache_ttl)
    store.ensure_dir()
    return store


@pytest.fixture
def service(settings, cache):
    return GeoService(settings, cache)


@pytest.fixture
def client(settings):
    from main import create_app

    with TestClient(create_app(settings)) as test_client:
        yield test_client
