"""Service exports for convenient imports."""

from .base import BaseService

__all__ = ["BaseService"]
