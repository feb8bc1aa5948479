from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    # Fallback record for model output that is not a recipe
    fallback_title: str = "Delicious Recipe"
    fallback_tag: str = "ai-generated"

    # Per-IP limit on the parsing endpoints
    parse_rate_limit: str = "120/minute"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost",
        "http://127.0.0.1",
    ]


settings = Settings()
