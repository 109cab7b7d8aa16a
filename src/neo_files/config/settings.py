"""
File URL resolution settings for neo-files.

Pydantic settings controlling which fallback handlers run when a file URL
cannot be produced directly.
"""
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FileUrlSettings(BaseSettings):
    """Settings for the cannot-get-url fallback chain.

    Environment variables use the ``FILE_URL_`` prefix, for example::

        FILE_URL_FALLBACK_HANDLERS=generate_format_on_the_fly,return_default_url,raise_error
        FILE_URL_RAISE_WHEN_UNHANDLED=false
    """

    model_config = SettingsConfigDict(
        env_prefix="FILE_URL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    fallback_handlers: str = Field(
        default="raise_error",
        description="Comma-separated handler references run in order"
    )
    raise_when_unhandled: bool = Field(
        default=True,
        description="Raise CannotGetUrl when no handler resolved the url"
    )

    @field_validator("fallback_handlers")
    @classmethod
    def validate_fallback_handlers(cls, v: str) -> str:
        """Normalize whitespace around handler references."""
        names = [name.strip() for name in v.split(",") if name.strip()]
        return ",".join(names)

    @property
    def handler_names(self) -> List[str]:
        """Handler references in configured order."""
        if not self.fallback_handlers:
            return []
        return self.fallback_handlers.split(",")


@lru_cache()
def get_file_url_settings() -> FileUrlSettings:
    """Get cached file url settings."""
    return FileUrlSettings()
