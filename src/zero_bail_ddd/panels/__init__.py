"""Panel builders for the DDD event study."""

from .ddd import DDDPanel

__all__ = ["DDDPanel"]
