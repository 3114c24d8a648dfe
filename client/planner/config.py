"""
Client Configuration
"""
from pydantic_settings import BaseSettings
from pydantic import Field
from functools import lru_cache


class PlannerSettings(BaseSettings):
    """
    Client settings loaded from environment variables
    """
    API_URL: str = Field(default="http://localhost:5000")
    REQUEST_TIMEOUT: float = Field(default=10.0)  # seconds

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_planner_settings() -> PlannerSettings:
    return PlannerSettings()
