from pydantic_settings import BaseSettings, SettingsConfigDict

_DEV_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:3000",
    "http://localhost:5000",
    "https://confeitaria-lucrativa.netlify.app",
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="PIXCHECKOUT_", extra="ignore")

    abacatepay_api_key: str = ""
    abacatepay_base_url: str = "https://api.abacatepay.com/v1"
    abacatepay_timeout: float = 30.0  # seconds

    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 3000

    frontend_url: str = ""
    allowed_origins: list[str] = list(_DEV_ORIGINS)
    allowed_origin_regex: str = r".*\.netlify\.app"

    log_level: str = "INFO"
    log_json: bool = False

    @property
    def gateway_configured(self) -> bool:
        return bool(self.abacatepay_api_key)

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def cors_origins(self) -> list[str]:
        origins = list(self.allowed_origins)
        if self.frontend_url and self.frontend_url not in origins:
            origins.insert(0, self.frontend_url)
        return origins


settings = Settings()
