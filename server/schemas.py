from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator
from pydantic_core import PydanticCustomError

from tictactoe.core import GameState


class GameResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    board: str = Field(description="9 cells, row-major, space for empty")
    current_player: str = Field(alias="currentPlayer")
    status: str = Field(description="Active | Won | Draw")
    etag: str = Field(alias="eTag")

    @classmethod
    def from_state(cls, game: GameState) -> "GameResponse":
        return cls(
            id=game.id,
            board=game.board_string,
            current_player=game.current_player,
            status=game.status.value,
            etag=game.etag,
        )


class MoveRequest(BaseModel):
    position: StrictInt = 0
    player: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("position")
    @classmethod
    def position_in_range(cls, value: int) -> int:
        if not 0 <= value <= 8:
            raise PydanticCustomError("position_range", "Position must be between 0 and 8")
        return value

    @field_validator("player")
    @classmethod
    def player_is_mark(cls, value: Optional[str]) -> str:
        if not value or not value.strip():
            raise PydanticCustomError("player_required", "The Player field is required")
        if value not in ("X", "O"):
            raise PydanticCustomError("player_mark", "Player must be X or O")
        return value


class ErrorResponse(BaseModel):
    type: str
    title: str
    status: int
    detail: str
