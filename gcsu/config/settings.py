from __future__ import annotations

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import DEFAULT_MODULE_PREFIX, GSUTIL_BIN

# Load .env once, early
load_dotenv()


class Settings(BaseSettings):
    """Application config (env or .env), every key prefixed with GCSU_."""

    model_config = SettingsConfigDict(env_prefix="GCSU_", env_file=None, extra="ignore")

    default_bucket: str | None = None
    module_prefix: str = Field(default=DEFAULT_MODULE_PREFIX)
    log_level: str = Field(default="INFO")
    gsutil_bin: str = Field(default=GSUTIL_BIN)
    dry_run: bool = False


def get_settings() -> Settings:
    return Settings()
