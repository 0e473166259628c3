from pydantic import BaseModel, ConfigDict, Field


class StatsPanels(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    stats_card: str | None = Field(None, alias="statsCard")
    streak_stats: str | None = Field(None, alias="streakStats")
    top_languages: str | None = Field(None, alias="topLanguages")
    heatmap: str | None = None
    trophies: str | None = None


class StatsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    identifier: str
    avatar_url: str = Field(alias="avatarUrl")
    stats: StatsPanels
    urls: dict[str, str]
    failures: dict[str, str] = {}


class ErrorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = False
    error: str
    identifier: str | None = None
    details: str | None = None
    upstream_status: int | None = Field(None, alias="upstreamStatus")
    resource: str | None = None
