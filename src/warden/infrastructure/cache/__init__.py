from warden.infrastructure.cache.memory_ttl_cache import InMemoryTTLCache
from warden.infrastructure.cache.redis_ttl_cache import RedisTTLCache

__all__ = ["InMemoryTTLCache", "RedisTTLCache"]
