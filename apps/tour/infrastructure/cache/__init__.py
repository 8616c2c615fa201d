"""Cache Adapters."""

from tour.infrastructure.cache.memory_pet_info_cache import InMemoryPetInfoCache

__all__ = ["InMemoryPetInfoCache"]
