from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "Task List"

    # DB
    DATABASE_URL: str = "sqlite:///./data/tasks.db"
    # Bumping this wipes the tasks table on next open (see TaskStore.open).
    SCHEMA_VERSION: int = 1
    SQL_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

def get_settings() -> Settings:
    return Settings()
