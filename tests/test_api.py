"""HTTP tests through the FastAPI app."""

from conftest import DATASET, SUMMARY_JSON, geojson_body
from locations.levels import Level


def test_index(client):
    r = client.get("/")
    assert r.status_code == 200
    body = r.json()
    assert body["api_version"] == "2.0"
    assert set(body["endpoints"]) == {"Basic Endpoints", "Search & Autocomplete", "Data Endpoints", "Cache Management"}
    assert r.headers["X-API-Version"] == "2.0"


def test_unknown_path_returns_index(client):
    r = client.get("/whatever/else")
    assert r.status_code == 200
    assert "endpoints" in r.json()


def test_json_is_pretty_printed(client):
    r = client.get("/")
    assert "\n    " in r.text
    r = client.get("/provinces")
    assert r.headers["content-type"].startswith("application/json")


def test_files_by_level(client):
    for level, names in DATASET.items():
        r = client.get(f"/files/{level.value}")
        assert r.status_code == 200
        assert set(r.json()) == set(names)


def test_files_invalid_level(client):
    r = client.get("/files/country")
    assert r.status_code == 404
    body = r.json()
    assert "Invalid level: country" in body["error"]
    assert isinstance(body["timestamp"], int)


def test_files_without_level(client):
    r = client.get("/files")
    assert r.status_code == 404
    assert r.json()["error"].startswith("Usage: /files/{level}")


def test_provinces(client):
    r = client.get("/provinces")
    assert set(r.json()) == set(DATASET[Level.PROVINCE])


def test_regencies_filtered_by_province(client):
    r = client.get("/regencies/PAPUA")
    assert r.status_code == 200
    assert set(r.json()) == {"JAYAPURA__PAPUA", "KEEROM__PAPUA"}

    r = client.get("/regencies/papua tengah")
    assert r.json() == ["Nabire__papua tengah"]


def test_regencies_unfiltered(client):
    assert set(client.get("/regencies").json()) == set(DATASET[Level.REGENCY])


def test_districts_and_villages_by_parent(client):
    assert set(client.get("/districts/jayapura").json()) == {"ABEPURA_JAYAPURA", "SENTANI_JAYAPURA"}
    assert set(client.get("/villages/AIMAS").json()) == {"KLAMALU_AIMAS", "SORONG KOTA_AIMAS"}
    assert client.get("/villages/nowhere").json() == []


def test_autocomplete(client):
    r = client.get("/autocomplete/district/ab")
    assert r.json() == ["ABEPURA_JAYAPURA"]


def test_autocomplete_requires_prefix(client):
    r = client.get("/autocomplete/district")
    assert r.status_code == 404
    assert r.json()["error"] == "Usage: /autocomplete/{level}/{prefix}"


def test_autocomplete_invalid_level(client):
    r = client.get("/autocomplete/country/ab")
    assert r.status_code == 404
    assert "Invalid level" in r.json()["error"]


def test_search(client):
    r = client.get("/search/village/sorong")
    assert r.json() == ["SORONG KOTA_AIMAS"]


def test_search_requires_query(client):
    r = client.get("/search/village")
    assert r.status_code == 404
    assert r.json()["error"] == "Usage: /search/{level}/{query}"


def test_geojson(client):
    r = client.get("/geojson/regency/jayapura__papua")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("application/geo+json")
    assert r.text == geojson_body("JAYAPURA__PAPUA")
    assert r.headers["X-API-Version"] == "2.0"


def test_geojson_second_request_served_from_cache(client):
    first = client.get("/geojson/province/PAPUA")
    assert client.get("/cache").json()["cache_files"] >= 1
    second = client.get("/geojson/province/papua")
    assert second.content == first.content


def test_geojson_not_found(client):
    r = client.get("/geojson/village/doesnotexist")
    assert r.status_code == 404
    assert "doesnotexist" in r.json()["error"]
    assert "features" not in r.text


def test_geojson_invalid_level(client):
    r = client.get("/geojson/country/papua")
    assert r.status_code == 404
    assert r.json()["error"].startswith("Invalid level: country")


def test_geojson_missing_filename(client):
    r = client.get("/geojson/village")
    assert r.status_code == 404
    assert r.json()["error"] == "Usage: /geojson/{level}/{filename}"


def test_structured(client):
    r = client.get("/structured/administrative_summary")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("application/json")
    assert r.content == SUMMARY_JSON.encode("utf-8")


def test_structured_not_found(client):
    r = client.get("/structured/administrative_structure")
    assert r.status_code == 404
    assert r.json()["error"] == "Structured data not found: administrative_structure"


def test_structured_missing_type(client):
    r = client.get("/structured")
    assert r.status_code == 404
    assert r.json()["error"] == "Usage: /structured/{type}"


def test_cache_stats_and_clear(client):
    client.get("/provinces")
    client.get("/regencies/papua")
    client.get("/geojson/province/papua")

    stats = client.get("/cache").json()
    n = stats["cache_files"]
    assert n >= 3
    assert stats["cache_ttl"] == 3600
    assert stats["cache_size"] > 0

    r = client.get("/cache/clear")
    assert r.json() == {"message": "Cache cleared", "files_deleted": n}
    assert client.get("/cache").json()["cache_files"] == 0


def test_cache_bad_subcommand(client):
    r = client.get("/cache/flush")
    assert r.status_code == 404
    assert r.json()["error"] == "Usage: /cache or /cache/clear"


def test_query_parameter_entry_point(client):
    r = client.get("/", params={"q": "files/regency"})
    assert set(r.json()) == set(DATASET[Level.REGENCY])

    r = client.get("/", params={"q": "geojson/village/doesnotexist"})
    assert r.status_code == 404
    assert "doesnotexist" in r.json()["error"]

    r = client.get("/", params={"q": "/structured/provinces_list/"})
    assert r.json() == ["Papua"]


def test_cache_directory_created_on_startup(settings):
    from fastapi.testclient import TestClient

    from main import create_app

    app = create_app(settings)
    assert not hasattr(app.state, "settings")
    assert not settings.cache_dir.exists()
    with TestClient(app):
        assert settings.cache_dir.is_dir()
