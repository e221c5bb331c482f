"""File-based cache with a fixed time-to-live.

Each entry is one `<fingerprint>.cache` file; its mtime is the last-write
time. Writes go through a temp file and `os.replace`, so a reader sees
either the old or the new content. There is no locking: concurrent writers
to the same fingerprint race and the last replace wins.

Every I/O failure is logged and reported as a miss (or a skipped write);
the cache never fails a request.
"""

import contextlib
import hashlib
import json
import logging
import os
import tempfile
import time
from pathlib import Path

logger = logging.getLogger(__name__)

CACHE_SUFFIX = ".cache"
DEFAULT_TTL = 3600


def fingerprint(tokens) -> str:
    """Stable key for an ordered sequence of string tokens."""
    payload = json.dumps([str(t) for t in tokens], ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


class CacheStore:
    def __init__(self, directory: Path, ttl: int = DEFAULT_TTL, enabled: bool = True):
        self.directory = Path(directory)
        self.ttl = ttl
        self.enabled = enabled

    def ensure_dir(self) -> None:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("Could not create cache directory %s: %s", self.directory, e)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}{CACHE_SUFFIX}"

    def get(self, key: str) -> bytes | None:
        """Stored bytes for `key`, or None if absent or older than the TTL."""
        if not self.enabled:
            return None

        path = self._path(key)
        try:
            age = time.time() - path.stat().st_mtime
            if age >= self.ttl:
                logger.debug("Cache stale: %s (age %.0fs)", key, age)
                return None
            data = path.read_bytes()
        except FileNotFoundError:
            logger.debug("Cache miss: %s", key)
            return None
        except OSError as e:
            logger.warning("Cache read failed for %s: %s", key, e)
            return None

        logger.debug("Cache hit: %s", key)
        return data

    def set(self, key: str, data: bytes) -> None:
        if not self.enabled:
            return

        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
            os.replace(tmp_name, self._path(key))
        except OSError as e:
            logger.warning("Cache write failed for %s: %s", key, e)
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)

    def get_json(self, key: str):
        """Decoded JSON entry, or None on miss or undecodable content."""
        raw = self.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw.decode("utf-8"))
        except ValueError as e:
            logger.warning("Discarding unreadable cache entry %s: %s", key, e)
            return None

    def set_json(self, key: str, value) -> None:
        self.set(key, json.dumps(value, ensure_ascii=False).encode("utf-8"))

    def _entries(self) -> list[Path]:
        try:
            return [p for p in self.directory.iterdir() if p.name.endswith(CACHE_SUFFIX) and p.is_file()]
        except OSError:
            return []

    def stats(self) -> dict:
        count = 0
        size = 0
        for path in self._entries():
            try:
                size += path.stat().st_size
            except OSError:
                # removed by a concurrent clear
                continue
            count += 1
        return {"cache_files": count, "cache_size": size, "cache_ttl": self.ttl}

    def clear(self) -> int:
        """Delete every entry; returns how many files were removed."""
        deleted = 0
        for path in self._entries():
            try:
                path.unlink()
            except FileNotFoundError:
                continue
            except OSError as e:
                logger.warning("Could not delete cache file %s: %s", path, e)
                continue
            deleted += 1
        logger.info("Cache cleared: %d files deleted", deleted)
        return deleted
