"""Application configuration via Pydantic Settings.

NOTE: Variable names match the ones the bot has always used (GOOGLE_MAPS_TOKEN,
SUPABASE_ENDPOINT, SUPABASE_TOKEN, ...) so existing .env files keep working.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Geocoder
    geocoder_provider: Literal["google", "nominatim"] = Field(
        default="google", validation_alias="GEOCODER_PROVIDER"
    )
    google_maps_token: str = Field(default="", validation_alias="GOOGLE_MAPS_TOKEN")
    geocoder_user_agent: str = Field(default="tetramap", validation_alias="GEOCODER_USER_AGENT")
    geocoder_timeout: float = Field(default=10.0, validation_alias="GEOCODER_TIMEOUT")

    # Storage
    storage_backend: Literal["postgrest", "sql"] = Field(
        default="postgrest", validation_alias="STORAGE_BACKEND"
    )
    supabase_endpoint: str = Field(default="", validation_alias="SUPABASE_ENDPOINT")
    supabase_token: str = Field(default="", validation_alias="SUPABASE_TOKEN")
    supabase_native_upsert: bool = Field(default=True, validation_alias="SUPABASE_NATIVE_UPSERT")
    storage_timeout: float = Field(default=10.0, validation_alias="STORAGE_TIMEOUT")
    database_url: str = Field(default="", validation_alias="DATABASE_URL")

    # Chat platform
    command_token: str = Field(default="", validation_alias="COMMAND_TOKEN")
    chat_webhook_url: str = Field(default="", validation_alias="CHAT_WEBHOOK_URL")

    # App
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
        "extra": "ignore",
    }

    def missing_credentials(self) -> list[str]:
        """Env names that the selected backends need but are empty."""
        required = {"COMMAND_TOKEN": self.command_token}
        if self.geocoder_provider == "google":
            required["GOOGLE_MAPS_TOKEN"] = self.google_maps_token
        if self.storage_backend == "postgrest":
            required["SUPABASE_ENDPOINT"] = self.supabase_endpoint
            required["SUPABASE_TOKEN"] = self.supabase_token
        else:
            required["DATABASE_URL"] = self.database_url
        return [name for name, value in required.items() if not value]


settings = Settings()
