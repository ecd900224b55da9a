from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TRAINERTRACKER_",
        case_sensitive=False,
    )

    # App
    env: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    db_url: str = "sqlite+aiosqlite:///./trainertracker.db"

    # Scheduling
    slot_step_minutes: int = 30
    default_slot_duration_minutes: int = 60


def get_settings() -> Settings:
    return Settings()
