from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from analytics.team_layout import LayoutConfig, MemberPlacement


class Settings(BaseSettings):
    # core
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # persistence: the whole graph lives in one JSON document
    DATA_FILE: Path = Path("data.json")

    # comma-separated list; "*" when unset outside prod
    FRONTEND_ORIGIN: str | None = None

    # layout
    # 0 lays every team out on a single row
    LAYOUT_TEAMS_PER_ROW: int = 3
    LAYOUT_MEMBER_PLACEMENT: MemberPlacement = "circle"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)


@lru_cache
def get_settings() -> Settings:
    return Settings()


def layout_config(settings: Settings | None = None) -> LayoutConfig:
    settings = settings or get_settings()
    return LayoutConfig(
        teams_per_row=settings.LAYOUT_TEAMS_PER_ROW or None,
        member_placement=settings.LAYOUT_MEMBER_PLACEMENT,
    )
