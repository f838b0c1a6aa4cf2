"""
Pydantic models for the presentation adapter.
- Describe a read-only snapshot of the board after each change.
- Validate the one request body we accept (a direct cell value).
The secret is only ever exposed through `solution`, and only when revealed.
"""

from typing import List, Literal

from pydantic import BaseModel, Field

from .config import PALETTE_SIZE


# 1. Validates a direct cell edit
class PlaceRequest(BaseModel):
    symbol: int = Field(
        ..., ge=0, le=PALETTE_SIZE,
        description=f"Color to put in the cell: 0 clears it, 1..{PALETTE_SIZE} are colors.",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"symbol": 3},
                {"symbol": 0},   # clear the cell
            ]
        }
    }


# 2. One row of the board
class RowOut(BaseModel):
    index: int = Field(..., description="Row number, 0 is the first guess")
    guess: List[int] = Field(..., description="Symbols in the row (0 = unset)")
    submitted: bool = Field(..., description="True once the row has been scored")
    black: int | None = Field(None, description="Right color, right place (submitted rows only)")
    white: int | None = Field(None, description="Right color, wrong place (submitted rows only)")
    clues: List[Literal["B", "W", " "]] = Field(..., description="Hint pegs; order carries no meaning")


# 3. The whole board as the front-end draws it
class BoardState(BaseModel):
    code_length: int = Field(..., description="Symbols per row")
    max_guesses: int = Field(..., description="Rows on the board")
    palette_size: int = Field(..., description="Number of colors")
    status: Literal["in_progress", "won", "lost"] = Field(..., description="Current state of the game")
    remaining_guesses: int = Field(..., description="How many guesses remain")
    can_submit: bool = Field(..., description="Whether the pending row is complete and may be scored")
    revealed: bool = Field(..., description="Whether the solution row shows the secret")
    revision: int = Field(..., description="Bumped on every change; redraw when it moves")
    message: str = Field(..., description="Status line for the player")
    rows: List[RowOut] = Field(..., description="Every row of the board, top to bottom")
    solution: List[int] = Field(..., description="The secret when revealed, otherwise all zeros")
