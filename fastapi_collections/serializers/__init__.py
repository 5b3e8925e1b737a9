"""Response serializers."""

from .base import Serializer

__all__ = ["Serializer"]
