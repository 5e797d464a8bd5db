from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from services.pairs import DEFAULT_PAIRS


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LTP_")

    # upstream
    KRAKEN_BASE_URL: str = "https://api.kraken.com"
    KRAKEN_TIMEOUT_SECONDS: float = 10.0

    # cache
    CACHE_TTL_SECONDS: float = 30.0

    # pairs returned when no pair/pairs query param is given
    DEFAULT_PAIRS: List[str] = Field(default_factory=lambda: list(DEFAULT_PAIRS))

    # server
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"
