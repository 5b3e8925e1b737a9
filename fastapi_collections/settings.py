from pydantic_settings import BaseSettings, SettingsConfigDict


class SerializerSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FASTAPI_COLLECTIONS_")

    # None returns collections as a bare list
    collection_envelope: str | None = None
    meta_envelope: str = "_meta"
    links_envelope: str = "_links"

    # Query parameters read by the serializer
    fields_param: str = "fields"
    expand_param: str = "expand"
