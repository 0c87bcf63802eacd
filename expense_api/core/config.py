from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG, API_PREFIX, SEED_DEMO_DATA, CORS_ALLOW_ORIGIN).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "Expense API"
    debug: bool = False
    version: str = "0.1.0"

    # Routing
    api_prefix: str = "/api"

    # In-memory store
    seed_demo_data: bool = True  # load the three fixture expenses into each new store

    # CORS
    cors_allow_origin: str = "*"

    def init_post_load(self) -> None:
        """Normalize derived fields and reject unusable values."""
        prefix = self.api_prefix.strip().rstrip("/")
        if prefix and not prefix.startswith("/"):
            prefix = "/" + prefix
        self.api_prefix = prefix
        if not self.cors_allow_origin.strip():
            raise ValueError("cors_allow_origin must not be empty")


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
