from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SystemInfo(BaseModel):
    """Deployment and build metadata shown in the UI footer."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    # Whether the embedded database console is exposed.
    db_console_enabled: bool | None = Field(default=None, alias="springConsoleEnabled")
    show_docs_link: bool | None = None

    start_quarter: str | None = None
    end_quarter: str | None = None
    source_repo_url: str | None = None
    commit_message: str | None = None
    commit_id: str | None = None
    commit_url: str | None = None


class HealthResponse(BaseModel):
    status: str = "ok"
