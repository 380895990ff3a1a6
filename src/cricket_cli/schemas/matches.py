"""Pydantic schemas for CricketData API payloads."""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TeamInfo(BaseModel):
    """Short team details attached to a match."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(None, description="Team name")
    shortname: Optional[str] = Field(None, description="Team short name, e.g. IND")
    img: Optional[str] = Field(None, description="Team logo URL")


class Score(BaseModel):
    """Score of one innings."""

    model_config = ConfigDict(extra="ignore")

    r: Optional[int] = Field(None, description="Runs")
    w: Optional[int] = Field(None, description="Wickets")
    o: Optional[Union[int, float]] = Field(None, description="Overs")
    inning: Optional[str] = Field(None, description="Innings label")


class Match(BaseModel):
    """A match record as returned by the API.

    Index 0 and 1 of ``score`` and ``team_info`` follow the ordering of ``teams``.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: Optional[str] = Field(None, description="API match ID")
    name: str = Field("", description="Display name")
    match_type: Optional[str] = Field(None, alias="matchType", description="Format, e.g. t20")
    status: str = Field("", description="Free-text status")
    venue: str = Field("", description="Venue name")
    date: Optional[str] = Field(None, description="Match date")
    date_time_gmt: Optional[str] = Field(None, alias="dateTimeGMT", description="Start timestamp (GMT)")
    teams: List[str] = Field(default_factory=list, description="Team names")
    team_info: List[TeamInfo] = Field(default_factory=list, alias="teamInfo", description="Team details")
    score: List[Score] = Field(default_factory=list, description="Innings scores")

    @field_validator("name", "status", "venue", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        """Treat null text fields as empty."""
        return "" if v is None else v

    def short_name(self, index: int) -> Optional[str]:
        """Short name of the team at ``index``, if known."""
        if index < len(self.team_info):
            return self.team_info[index].shortname
        return None

    def team_label(self, index: int) -> str:
        """Short name of the team at ``index``, falling back to its full name."""
        short = self.short_name(index)
        if short:
            return short
        if index < len(self.teams):
            return self.teams[index]
        return ""

    def innings_score(self, index: int) -> Optional[Score]:
        if index < len(self.score):
            return self.score[index]
        return None


class ApiResponse(BaseModel):
    """Envelope returned by every API endpoint."""

    model_config = ConfigDict(extra="ignore")

    status: Optional[str] = None
    reason: Optional[str] = None
    data: Optional[List[Match]] = None

    @property
    def is_failure(self) -> bool:
        return self.status == "failure"
