"""SQLAlchemy collection provider."""

from .provider import SQLAlchemyCollectionProvider

__all__ = ["SQLAlchemyCollectionProvider"]
