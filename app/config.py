from pydantic_settings import BaseSettings, SettingsConfigDict
class Settings(BaseSettings):
    APP_ENV: str = "dev"
    DB_URL: str = "sqlite:///./station_ledger.db"
    TZ: str = "UTC"
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str | None = None
    OTHER_COST_RATE: float = 0.05   # share of input cost booked as other costs in monthly summaries
    DEFAULT_MONTH_COUNT: int = 6
    MAX_MONTH_COUNT: int = 24
    MIN_YEAR: int = 2020
    MAX_YEAR: int = 2030
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
settings = Settings()
