from cachetools import TTLCache
from .config import settings

# In-process store for rate-limit buckets in local dev and single-worker runs.
_local_cache = TTLCache(maxsize=4096, ttl=settings.CACHE_TTL_SECONDS)

try:
    import redis  # Optional dependency
except ImportError:
    redis = None

class Cache:
    """
    Thin abstraction over Redis/in-memory so swapping is one flag away.
    Fingerprints are cheap and never stored here; only counters are.
    """
    def __init__(self):
        self.backend = None
        if settings.USE_REDIS and redis is not None:
            self.backend = redis.Redis.from_url(settings.REDIS_URL, decode_responses=True)

    def incr(self, key: str) -> int:
        """Increment a counter, creating it with the cache TTL on first hit."""
        if self.backend:
            count = int(self.backend.incr(key))
            if count == 1:
                self.backend.expire(key, settings.CACHE_TTL_SECONDS)
            return count
        try:
            count = int(_local_cache.get(key) or 0) + 1
        except ValueError:
            count = 1
        _local_cache[key] = str(count)
        return count

    def clear(self) -> None:
        """Drop in-process entries (tests and local dev)."""
        _local_cache.clear()

cache = Cache()
