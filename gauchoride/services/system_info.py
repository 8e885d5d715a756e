from __future__ import annotations

from gauchoride.config import Settings
from gauchoride.models.schemas import SystemInfo


def commit_url_for(source_repo_url: str | None, commit_id: str | None) -> str | None:
    if not source_repo_url or not commit_id:
        return None
    return f"{source_repo_url.rstrip('/')}/commit/{commit_id}"


def get_system_info(settings: Settings) -> SystemInfo:
    commit_url = settings.commit_url or commit_url_for(settings.source_repo_url, settings.commit_id)
    return SystemInfo(
        db_console_enabled=settings.db_console_enabled,
        show_docs_link=settings.show_docs_link,
        start_quarter=settings.start_quarter,
        end_quarter=settings.end_quarter,
        source_repo_url=settings.source_repo_url,
        commit_message=settings.commit_message,
        commit_id=settings.commit_id,
        commit_url=commit_url,
    )
