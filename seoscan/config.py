from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    PROJECT_NAME: str = "SEOscan"
    VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"

    API_V1_STR: str = "/api/v1"

    CORS_ORIGINS: str = "http://localhost:3000"

    LOG_LEVEL: str = "INFO"

    # Outbound HTTP
    USER_AGENT: str = "SEOscanBot/1.0 (+https://seoscan.dev/bot)"
    FETCH_TIMEOUT_SECONDS: float = 9.0
    MAX_HTML_BYTES: int = 2 * 1024 * 1024  # 2 MiB
    # robots.txt / sitemap probes
    DISCOVERY_TIMEOUT_SECONDS: float = 10.0
    MAX_DISCOVERY_BYTES: int = 10 * 1024 * 1024  # 10 MiB

    # Rate Limiting Configuration
    REDIS_URL: str = "redis://localhost:6379/0"
    RATE_LIMIT_ENABLED: bool = False
    RATE_LIMIT_ANALYZE_PER_MINUTE: int = 10
    RATE_LIMIT_WINDOW_SECONDS: int = 60

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> List[str]:
        if isinstance(self.CORS_ORIGINS, str):
            return [o.strip() for o in self.CORS_ORIGINS.split(",")]
        return self.CORS_ORIGINS


settings = Settings()
