"""
Runtime configuration for templatecheck.

Only the base-document resolver consults configuration. Every checker
and conversion is pure and ignores it, so settings can never change a
validation outcome.

Pydantic v2 settings management: values are read from the environment
(prefix ``TEMPLATECHECK_``) or a local ``.env`` file, validated once and
frozen.
"""

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Engine settings parsed from the environment.

    Fails fast on malformed values (e.g. a non-positive timeout).
    """

    # ---------------------------------------------------------------------
    # Base-document resolution (network egress)
    # ---------------------------------------------------------------------

    enable_network_fetch: Annotated[
        bool,
        Field(
            default=True,
            description=(
                "Allow URL references in template.basePdf to be fetched. "
                "When disabled, URL references are returned unchanged."
            ),
        ),
    ]

    fetch_timeout_seconds: Annotated[
        float,
        Field(
            default=30.0,
            gt=0,
            description="Timeout applied to base PDF downloads",
        ),
    ]

    fetch_follow_redirects: Annotated[
        bool,
        Field(
            default=True,
            description="Follow HTTP redirects when downloading a base PDF",
        ),
    ]

    user_agent: Annotated[
        str,
        Field(
            default="templatecheck/0.1.0",
            min_length=1,
            description="User-Agent header sent with base PDF downloads",
        ),
    ]

    model_config = SettingsConfigDict(
        env_prefix="TEMPLATECHECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Process-wide settings provider.

    Parsed once; call ``get_settings.cache_clear()`` to re-read the
    environment (tests do this).
    """
    return Settings()
