"""Client settings loaded from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Xverify account credentials
    api_key: str = ""
    domain: str = ""

    # Transport
    base_uri: str = "https://api.xverify.com/v2/"
    timeout: float = 5.0  # Seconds, single attempt per call

    # Logging
    log_level: str = "INFO"
    audit_log_file: str = ""  # Empty = stdout only

    model_config = {"env_prefix": "XVERIFY_", "env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key.strip() and self.domain.strip())


@lru_cache
def get_settings() -> Settings:
    return Settings()
