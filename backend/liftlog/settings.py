from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    ENV: str = "local"
    DATABASE_URL: str = "sqlite:///./liftlog.db"

    # Active workout
    TIMER_INTERVAL_SECONDS: float = 1.0
    DEFAULT_EXERCISE_COUNT: int = 3      # defaults pre-populated on start
    SEED_SET_COUNT: int = 3              # empty sets on every new exercise
    COMMIT_RETRIES: int = 1

    # History
    CALENDAR_FIRST_WEEKDAY: int = 6      # 0 = Monday ... 6 = Sunday

    ALLOW_ORIGINS: str = "*"
    API_VERSION: str = "dev"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

@lru_cache
def get_settings() -> Settings:
    return Settings()
