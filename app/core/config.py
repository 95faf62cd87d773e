from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    SECRET_KEY: str = "change_me_in_env"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24  # 24h

    DATABASE_URL: str = "sqlite:///./app.db"
    LOG_LEVEL: str = "INFO"

    # zona horaria para el "día" de GET /meetups?date=
    TIMEZONE: str = "UTC"
    # base de File.url
    APP_URL: str = "http://localhost:8000"

    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True)

settings = Settings()
