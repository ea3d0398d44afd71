from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "Shareledger Backend"
    DATABASE_URL: str = "sqlite+aiosqlite:///./shareledger.db"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
