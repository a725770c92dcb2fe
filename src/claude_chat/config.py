from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
    # --- secrets you actually need -------------------------------
    anthropic_api_key: SecretStr

    # --- convenience ---------------------------------------------
    log_level: str = "WARNING"

    @property
    def api_key(self) -> str:
        return self.anthropic_api_key.get_secret_value()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached Settings; raises ValidationError if the API key is missing."""
    return Settings()
