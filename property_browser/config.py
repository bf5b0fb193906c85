from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    MONGODB_URI: str | None = None
    MONGODB_DB: str = "ccube_research"
    MONGODB_COLLECTION: str = "apartment"

    PROPERTIES_LIMIT: int = 500
    PROPERTIES_API_URL: str = "http://localhost:8000/api/properties"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()


def get_settings() -> Settings:
    return settings
