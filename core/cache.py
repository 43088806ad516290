from typing import Optional, Any
from uuid import uuid4
import logging

from aiocache import SimpleMemoryCache

from core.config import settings

logger = logging.getLogger(__name__)

class ServiceCache:
    """Per-service in-memory cache that respects the enabled setting."""

    def __init__(self, namespace: str):
        self.namespace = namespace
        self.ttl: Optional[int] = settings.get_cache_ttl().get(namespace)
        self.enabled: bool = settings.cache["enabled"]
        # Keys scoped to this instance
        self._cache = SimpleMemoryCache(
            namespace=f"{settings.cache['prefix']}:{namespace}:{uuid4().hex}:"
        )

    async def get(self, key: str) -> Optional[Any]:
        if not self.enabled:
            return None
        value = await self._cache.get(key)
        if value is not None:
            logger.debug(f"Cache hit {self.namespace}:{key}")
        return value

    async def set(self, key: str, value: Any) -> None:
        if not self.enabled:
            return
        await self._cache.set(key, value, ttl=self.ttl)
