"""FastAPI dependencies for serializing collections."""

from typing import Annotated

from fastapi import Depends, Request, Response

from fastapi_collections.serializers.base import Serializer
from fastapi_collections.settings import SerializerSettings


def get_settings() -> SerializerSettings:
    """Create a settings instance from environment variables.

    Override this dependency in tests to inject custom settings.
    """
    return SerializerSettings()


SettingsDep = Annotated[SerializerSettings, Depends(get_settings)]


def get_serializer(
    request: Request, response: Response, settings: SettingsDep
) -> Serializer:
    """Return a serializer bound to the current request and response."""
    return Serializer.from_settings(settings, request=request, response=response)


SerializerDep = Annotated[Serializer, Depends(get_serializer)]
