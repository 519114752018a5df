"""Runtime configuration for the chronospan package.

Settings are loaded in priority order:
  1. Environment variables (highest priority)
  2. .env file in the project root
  3. Field defaults

``MODEL_ARN`` is only needed for the optional assistant; the age report
works without it.

Usage::

    from chronospan.config import settings

    print(settings.default_birth_date)
"""

import datetime

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="forbid",
        populate_by_name=True,
    )

    model_arn: str | None = Field(
        default=None,
        alias="MODEL_ARN",
        description="AWS Bedrock application inference profile ARN for the assistant.",
    )
    default_birth_date: datetime.date = Field(
        default=datetime.date(1995, 4, 15),
        alias="DEFAULT_BIRTH_DATE",
        description="Birth date used when the user leaves the prompt blank.",
    )

    @property
    def assistant_enabled(self) -> bool:
        return bool(self.model_arn)


settings = Settings()
