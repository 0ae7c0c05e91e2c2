from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt
from typing import List, Optional

from scoreboard.models.schema_models import GameConfigSchema, ScoreEntrySchema


class ScoreSubmissionModel(BaseModel):
    game_type: str = Field(alias="gameType", min_length=1)
    difficulty: str = Field(min_length=1)
    score: StrictInt | StrictFloat
    player_name: Optional[str] = Field(default=None, alias="playerName")
    game_config: Optional[GameConfigSchema] = Field(default=None, alias="gameConfig")

    model_config = ConfigDict(populate_by_name=True)


class SubmissionResponseModel(BaseModel):
    success: bool
    entry: ScoreEntrySchema


class LeaderboardResponseModel(BaseModel):
    leaderboard: List[ScoreEntrySchema]
    game: str
    difficulty: str
    total: int


class ErrorResponseModel(BaseModel):
    error: str


class HealthModel(BaseModel):
    ok: bool
    backing: str
