"""Core builders and capability protocols."""

from .capabilities import Arrayable, Validatable
from .envelope import EnvelopeBuilder
from .errors import ErrorBuilder

__all__ = ["Arrayable", "EnvelopeBuilder", "ErrorBuilder", "Validatable"]
