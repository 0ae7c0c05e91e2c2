from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from uuid import UUID
from datetime import datetime


class GameConfigSchema(BaseModel):
    board_width: int = Field(alias="boardWidth")
    board_height: int = Field(alias="boardHeight")
    mines_count: int = Field(alias="minesCount")

    # Unknown keys are carried through to storage and responses untouched.
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")


class ScoreEntrySchema(BaseModel):
    # id stays the first field: Redis orders equal scores by member bytes,
    # so the serialized entry must start with the time-ordered id.
    id: UUID
    game_type: str = Field(alias="gameType")
    difficulty: str
    score: int | float
    player_name: str = Field(alias="playerName")
    timestamp: datetime
    game_config: Optional[GameConfigSchema] = Field(default=None, alias="gameConfig")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_member(self) -> str:
        """Serialize the entry into the string stored as a sorted-set member."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_member(cls, member: str | bytes) -> "ScoreEntrySchema":
        return cls.model_validate_json(member)
