import logging

from caching.store import CacheStore, fingerprint
from config import Settings
from errors import NotFound
from locations.levels import LEVEL_DIRS, STRUCTURED_PREFIX, Level
from locations.resolver import DatasetResolver, filter_by_parent

logger = logging.getLogger(__name__)


class GeoService:
    """Resolver lookups memoized through the file cache."""

    def __init__(self, settings: Settings, cache: CacheStore):
        self.settings = settings
        self.cache = cache
        self.resolvers = {
            level: DatasetResolver(settings.level_dir(level), settings.geojson_ext)
            for level in Level
        }
        self.structured = DatasetResolver(settings.structured_dir, "json")

    def _cached_names(self, tokens, compute) -> list[str]:
        key = fingerprint(tokens)
        cached = self.cache.get_json(key)
        if isinstance(cached, list):
            return cached

        names = compute()
        self.cache.set_json(key, names)
        return names

    def _cached_bytes(self, tokens, path) -> bytes:
        key = fingerprint(tokens)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        try:
            content = path.read_bytes()
        except FileNotFoundError:
            raise NotFound(f"File not found: {path.name}")
        self.cache.set(key, content)
        return content

    # ----------------------------
    # LISTINGS
    # ----------------------------
    def list_names(self, level: Level) -> list[str]:
        resolver = self.resolvers[level]
        return self._cached_names(
            ["list", LEVEL_DIRS[level], resolver.ext],
            resolver.list_names,
        )

    def list_children(self, group: str, level: Level, parent: str | None = None) -> list[str]:
        """Names of `level`, optionally only those under `parent`.

        `group` is the public endpoint name ("regencies", ...) and keys the
        filtered result in the cache.
        """
        if parent is None:
            return self.list_names(level)

        return self._cached_names(
            [group, parent.upper()],
            lambda: filter_by_parent(self.list_names(level), parent),
        )

    def autocomplete(self, level: Level, prefix: str) -> list[str]:
        resolver = self.resolvers[level]
        return self._cached_names(
            ["autocomplete", LEVEL_DIRS[level], prefix.lower()],
            lambda: resolver.autocomplete(prefix),
        )

    def search(self, level: Level, query: str) -> list[str]:
        resolver = self.resolvers[level]
        return self._cached_names(
            ["search", LEVEL_DIRS[level], query.lower()],
            lambda: resolver.search(query),
        )

    # ----------------------------
    # DOCUMENTS
    # ----------------------------
    def geojson(self, level: Level, filename: str) -> bytes:
        resolver = self.resolvers[level]
        actual = resolver.find_exact(filename)
        if actual is None:
            raise NotFound(f"GeoJSON not found: {filename}")

        return self._cached_bytes(
            ["geojson", level.value, actual.lower()],
            resolver.path_for(actual),
        )

    def structured_document(self, doc_type: str) -> bytes:
        name = f"{STRUCTURED_PREFIX}{doc_type}"
        if name not in self.structured.list_names():
            raise NotFound(f"Structured data not found: {doc_type}")

        return self._cached_bytes(
            ["structured", doc_type],
            self.structured.path_for(name),
        )

