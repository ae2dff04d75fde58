from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    cors_origins: List[str] = ["http://localhost:5173"]
    log_level: str = "INFO"
    default_key: str = "C"
    strict_keys: bool = True
    max_chart_chars: int = 20000

    class Config:
        env_file = ".env"
        env_prefix = "CHORDSHEET_"


settings = Settings()
