import os
from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sqlloader.core.paths import ensure_trailing_separator
from sqlloader.schemas.enums import Verb


class Settings(BaseSettings):
    app_env: str = "prod"
    base_path: str = "/sql/"
    resource_package: Optional[str] = None  # e.g. "myapp.resources"
    resource_dir: str = "."  # used when resource_package is not set
    line_separator: str = os.linesep
    log_level: str = "INFO"
    log_json: bool = False

    insert_path: str = Verb.insert.default_prefix
    delete_path: str = Verb.delete.default_prefix
    update_path: str = Verb.update.default_prefix
    select_path: str = Verb.select.default_prefix
    merge_path: str = Verb.merge.default_prefix
    create_path: str = Verb.create.default_prefix
    alter_path: str = Verb.alter.default_prefix
    rename_path: str = Verb.rename.default_prefix
    truncate_path: str = Verb.truncate.default_prefix
    drop_path: str = Verb.drop.default_prefix
    grant_path: str = Verb.grant.default_prefix
    revoke_path: str = Verb.revoke.default_prefix

    model_config = SettingsConfigDict(
        env_prefix="SQL_LOADER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator(
        "base_path",
        "insert_path",
        "delete_path",
        "update_path",
        "select_path",
        "merge_path",
        "create_path",
        "alter_path",
        "rename_path",
        "truncate_path",
        "drop_path",
        "grant_path",
        "revoke_path",
        mode="before",
    )
    @classmethod
    def _normalize_prefix(cls, value: str) -> str:
        if not isinstance(value, str):
            raise ValueError("path prefixes must be strings")
        return ensure_trailing_separator(value.strip())

    @field_validator("resource_package", mode="before")
    @classmethod
    def _blank_package_is_none(cls, value: Optional[str]) -> Optional[str]:
        if isinstance(value, str):
            return value.strip() or None
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Optional[str]) -> str:
        if not value:
            return "INFO"

        if isinstance(value, str):
            cleaned = value.strip().upper()
            return cleaned or "INFO"

        raise ValueError("LOG_LEVEL must be a string")

    def prefixes(self) -> dict[Verb, str]:
        return {verb: getattr(self, f"{verb.value}_path") for verb in Verb}


@lru_cache
def get_settings() -> "Settings":
    return Settings()
