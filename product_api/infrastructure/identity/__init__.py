from .in_memory_registry import InMemoryIdentityRegistry, ReadWriteLock

__all__ = [
    "InMemoryIdentityRegistry",
    "ReadWriteLock",
]
