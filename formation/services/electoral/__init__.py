"""Electoral services."""

from formation.services.electoral.allocator import ElectoralAllocator

__all__ = ["ElectoralAllocator"]
