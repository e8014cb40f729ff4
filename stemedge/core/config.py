from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings."""

    # API Settings
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "StemEdge Lesson Engine"

    # CORS
    BACKEND_CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # AI tutor (left empty to run without a tutor)
    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL: str = "gpt-4o"
    TUTOR_TEMPERATURE: float = 0.7

    # Supabase auth/profile backend
    SUPABASE_URL: str | None = None
    SUPABASE_KEY: str | None = None
    SUPABASE_PROFILE_TABLE: str = "users"

    # Lesson progress storage
    PROGRESS_STORE_DIR: str = ".stemedge/progress"

    # Simulations
    SIM_TICK_INTERVAL: float = 0.1
    POPULATION_HISTORY_LIMIT: int = 51
    CARBON_SETTLE_SECONDS: float = 1.0

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
