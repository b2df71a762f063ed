# employee_admin/config.py
from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # Employee resource settings
    API_URL: str = "http://localhost:3000/employees"
    REQUEST_TIMEOUT: float = 10.0

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    RELOAD: bool = True

    # Admin page settings
    ADMIN_PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

@lru_cache()
def get_settings():
    return Settings()
