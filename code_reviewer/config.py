from pathlib import Path
from typing import Dict, List

from pydantic_settings import BaseSettings, SettingsConfigDict

from code_reviewer.constants import (
    DEFAULT_CORS_ORIGINS,
    DEFAULT_MAX_OUTPUT_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_SAFETY_SETTINGS,
    DEFAULT_SYSTEM_INSTRUCTION_PATH,
    DEFAULT_TEMPERATURE,
)

class Settings(BaseSettings):
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = DEFAULT_MODEL
    TEMPERATURE: float = DEFAULT_TEMPERATURE
    MAX_OUTPUT_TOKENS: int = DEFAULT_MAX_OUTPUT_TOKENS
    SAFETY_SETTINGS: Dict[str, str] = DEFAULT_SAFETY_SETTINGS
    SYSTEM_INSTRUCTION_PATH: Path = DEFAULT_SYSTEM_INSTRUCTION_PATH
    CORS_ORIGINS: List[str] = DEFAULT_CORS_ORIGINS
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
