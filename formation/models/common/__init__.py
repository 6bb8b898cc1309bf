"""Common models - shared base entity."""

from formation.models.common.base import BaseEntity

__all__ = ["BaseEntity"]
