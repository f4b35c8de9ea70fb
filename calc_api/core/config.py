from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

ALLOWED_ENVIRONMENTS = {"development", "production", "test"}


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, ENVIRONMENT, DEBUG, HOST, PORT).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "Conversion API"
    version: str = "1.0.0"

    # 'development' exposes internal error messages in 500 responses
    environment: str = "production"
    debug: bool = False

    # Server bootstrap
    host: str = "0.0.0.0"
    port: int = 3000

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def init_post_load(self) -> None:
        """Normalize and validate derived fields."""
        self.environment = self.environment.strip().lower()
        if self.environment not in ALLOWED_ENVIRONMENTS:
            raise ValueError(
                f"Unsupported environment '{self.environment}'. Allowed: {sorted(ALLOWED_ENVIRONMENTS)}"
            )


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
