# cache_manager.py
import hashlib
import threading
from typing import Any, Callable, Optional

from cachetools import TTLCache

from config import settings


class CacheManager:
    """
    In-memory, time-bounded cache for provider inputs (parsed climate series
    and condition snapshots). Scores are never cached; they are recomputed
    on every request.

    Usage
    -----
    cache = CacheManager(max_items=256, ttl_seconds=900)

    key = (round(lat, 4), round(lon, 4), start, end)    # any hashable tuple
    series = cache.get("nasa_power", key)
    if series is None:
        series = source.fetch_monthly_series(...)
        cache.set("nasa_power", key, series)
    """

    def __init__(self, max_items: int = 256, ttl_seconds: int = 900):
        self.mem = TTLCache(maxsize=max_items, ttl=ttl_seconds)
        self._lock = threading.Lock()

    # ---------- helpers --------------------------------------------------
    @staticmethod
    def _hash_key(kind: str, key_tuple: tuple) -> str:
        """Stable SHA-256 hash of (kind, *key_tuple)."""
        raw = (kind, *key_tuple)
        return hashlib.sha256(repr(raw).encode()).hexdigest()

    # ---------- public API ----------------------------------------------
    def get(self, kind: str, key_tuple: tuple) -> Optional[Any]:
        """Return cached object or None (missing or expired)."""
        h = self._hash_key(kind, key_tuple)
        with self._lock:
            return self.mem.get(h)

    def set(self, kind: str, key_tuple: tuple, obj: Any) -> None:
        h = self._hash_key(kind, key_tuple)
        with self._lock:
            self.mem[h] = obj

    def clear(self) -> None:
        with self._lock:
            self.mem.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self.mem)


cache = CacheManager(
    max_items=settings.CACHE_MAX_ITEMS,
    ttl_seconds=settings.CACHE_TTL_SECONDS,
)


# ---------- cache helpers -------------------------------------------------
def cache_or_run(section: str, key: tuple, builder: Callable[[], Any], store: CacheManager = cache) -> Any:
    """Try cache → build fresh → cache → return."""
    cached = store.get(section, key)
    if cached is not None:
        return cached
    obj = builder()
    store.set(section, key, obj)
    return obj
