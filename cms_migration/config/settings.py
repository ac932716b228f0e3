"""
Migration Settings
Runtime configuration loaded from the environment and an optional .env file
"""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parents[2]

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


def default_output_file(project_root: Path = PROJECT_ROOT) -> Path:
    """Output file next to the source checkout, or in the working directory once installed"""
    if (project_root / "pyproject.toml").exists():
        return project_root / "migration_output.json"
    return Path.cwd() / "migration_output.json"


class Settings(BaseSettings):
    """Application settings from environment"""
    model_config = SettingsConfigDict(env_prefix="CMS_MIGRATION_")

    output_file: Path = Field(default_factory=default_output_file)
    request_timeout: Optional[float] = Field(default=None, gt=0)
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)
    log_level: str = Field(default="INFO")


def get_settings() -> Settings:
    """Build settings from the current environment"""
    return Settings()
