from __future__ import annotations

from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env from the working directory; real environment variables win
ENV_FILE_NAME = ".env"
load_dotenv(Path.cwd() / ENV_FILE_NAME, override=False)


class Settings(BaseSettings):
    LANG_DIR: str = "i18n/lang"
    LANGUAGES: str = "en,fr"
    INDENT: int = 2
    LOG_LEVEL: str = "WARNING"
    LOG_FILE: bool = False

    @field_validator("LANGUAGES", mode="before")
    @classmethod
    def parse_languages(cls, v):  # type: ignore
        if isinstance(v, (list, tuple)):
            v = ",".join(str(x) for x in v)
        codes = [x.strip() for x in str(v).split(",") if x.strip()]
        if not codes:
            raise ValueError("LANGUAGES must name at least one language code")
        dupes = sorted({c for c in codes if codes.count(c) > 1})
        if dupes:
            raise ValueError(f"duplicate language codes: {', '.join(dupes)}")
        return ",".join(codes)

    @field_validator("INDENT")
    @classmethod
    def check_indent(cls, v: int) -> int:
        if v < 0:
            raise ValueError("INDENT must be zero or positive")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return level

    @property
    def languages(self) -> List[str]:
        return self.LANGUAGES.split(",")

    model_config = SettingsConfigDict(
        env_prefix="I18N_",
        env_file=ENV_FILE_NAME,
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
