from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PROJECT_NAME = 'Markdown Memo'
DEFAULT_APP_DIR_NAME = 'markdown-memo'
DEFAULT_DB_FILE_NAME = 'memo.db'


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    PROJECT_NAME: str = DEFAULT_PROJECT_NAME
    ENV: str = 'development'
    LOG_LEVEL: str = 'INFO'

    DB_PATH: Optional[Path] = None
    DB_IN_MEMORY: bool = False
    DB_ECHO: bool = False

    APP_DIR_NAME: str = DEFAULT_APP_DIR_NAME
    DB_FILE_NAME: str = DEFAULT_DB_FILE_NAME

    @field_validator('DB_PATH', mode='before')
    @classmethod
    def parse_db_path(cls, value):  # type: ignore[override]
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return None
            return Path(value).expanduser()
        return value


settings = Settings()
