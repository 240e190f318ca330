from .integration import cache_key, lookup_cached, store_cached, validate_cache_config
from .memory import MemoryCache, create_memory_cache

__all__ = [
    "MemoryCache",
    "create_memory_cache",
    "cache_key",
    "lookup_cached",
    "store_cached",
    "validate_cache_config",
]
