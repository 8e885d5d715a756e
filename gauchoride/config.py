from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    db_console_enabled: bool = Field(default=False, alias="DB_CONSOLE_ENABLED")
    show_docs_link: bool = Field(default=False, alias="SHOW_DOCS_LINK")

    # Quarter codes are YYYYQ, e.g. 20231.
    start_quarter: str | None = Field(default=None, alias="START_QTR")
    end_quarter: str | None = Field(default=None, alias="END_QTR")
    source_repo_url: str | None = Field(default=None, alias="SOURCE_REPO")
    commit_message: str | None = Field(default=None, alias="GIT_COMMIT_MESSAGE")
    commit_id: str | None = Field(default=None, alias="GIT_COMMIT_ID")
    commit_url: str | None = Field(default=None, alias="GIT_COMMIT_URL")

    request_log_stoplist: Annotated[list[str], NoDecode] = Field(
        default=["gauchoride.api.frontend_proxy"],
        alias="REQUEST_LOG_STOPLIST",
    )
    frontend_dev_url: str = Field(default="http://localhost:3000", alias="FRONTEND_DEV_URL")
    frontend_proxy_timeout: float = Field(default=10.0, alias="FRONTEND_PROXY_TIMEOUT")

    @field_validator("request_log_stoplist", mode="before")
    @classmethod
    def _split_stoplist(cls, value: object) -> object:
        # Comma separated in the environment: "a.b.Proxy,c.d.Static"
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
