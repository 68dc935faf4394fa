"""Service layer and request dependencies."""

from .promotion import PromotionService

__all__ = ["PromotionService"]
