'''
Local Mastermind board over HTTP (one player, one game per process)

Endpoints:
GET  /game                              -> read the board
POST /game/rows/{row}/cells/{column}    -> cycle a cell's color
PUT  /game/rows/{row}/cells/{column}    -> set a cell's color directly
POST /game/guess                        -> score the pending row
POST /game/reset                        -> new secret, empty board
POST /game/reveal                       -> show / hide the solution row

Every endpoint answers with the full board so the front-end can just redraw.
'''

import logging
from threading import RLock

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from .config import CODE_LENGTH, LOG_LEVEL, MAX_GUESSES, PALETTE_SIZE
from .engine import GameEngine
from .schemas import BoardState, PlaceRequest, RowOut

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


class GameSession:
    """
    Owns the engine and listens to it.
    Sync routes run on a thread pool, so every engine call goes through the lock.
    """

    def __init__(self, engine: GameEngine | None = None) -> None:
        self.engine = engine or GameEngine()
        self.lock = RLock()
        self.revision = 0
        self.engine.subscribe(self._on_change)

    def _on_change(self) -> None:
        self.revision += 1

    def snapshot(self) -> BoardState:
        engine = self.engine
        rows = []
        for index in range(MAX_GUESSES):
            guess, feedback = engine.history_row(index)
            rows.append(RowOut(
                index=index,
                guess=guess,
                submitted=feedback is not None,
                black=feedback.black if feedback else None,
                white=feedback.white if feedback else None,
                clues=engine.clue_row(index),
            ))

        return BoardState(
            code_length=CODE_LENGTH,
            max_guesses=MAX_GUESSES,
            palette_size=PALETTE_SIZE,
            status=engine.status,
            remaining_guesses=engine.remaining_guesses(),
            can_submit=engine.can_submit(),
            revealed=engine.revealed,
            revision=self.revision,
            message=status_message(engine),
            rows=rows,
            solution=engine.solution(),
        )


def status_message(engine: GameEngine) -> str:
    if engine.is_victory():
        return "You cracked the code!"
    if engine.remaining_guesses() == 0:
        return "You ran out of guesses!"
    return f"You have {engine.remaining_guesses()} guesses remaining."


app = FastAPI(title="Mastermind", version="1.0.0")

# Allow everything so a local front-end can talk to us
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

_session: GameSession | None = None
_session_lock = RLock()


def get_session() -> GameSession:
    """The board is built on first use, so importing the app draws no secret."""
    global _session
    with _session_lock:
        if _session is None:
            _session = GameSession()
        return _session

# ---------------- Routes ----------------

@app.get("/game", response_model=BoardState, summary="Get the board")
def get_game(session: GameSession = Depends(get_session)) -> BoardState:
    with session.lock:
        return session.snapshot()


@app.post("/game/rows/{row}/cells/{column}", response_model=BoardState, summary="Cycle a cell's color")
def cycle_cell(row: int, column: int, session: GameSession = Depends(get_session)) -> BoardState:
    """
    Only the pending row can be edited, and only while the game is running.
    Anything else leaves the board as it was (check `revision`).
    """
    with session.lock:
        session.engine.set_cell(row, column)
        return session.snapshot()


@app.put("/game/rows/{row}/cells/{column}", response_model=BoardState, summary="Set a cell's color")
def place_cell(
    row: int,
    column: int,
    payload: PlaceRequest,
    session: GameSession = Depends(get_session),
) -> BoardState:
    with session.lock:
        session.engine.place(row, column, payload.symbol)
        return session.snapshot()


@app.post("/game/guess", response_model=BoardState, summary="Submit the pending row")
def submit_guess(session: GameSession = Depends(get_session)) -> BoardState:
    with session.lock:
        if session.engine.submit() is None:
            if session.engine.is_over():
                detail = f"Game {session.engine.status}. No more guesses allowed."
            else:
                detail = "Fill every cell of the row before guessing."
            raise HTTPException(status_code=409, detail=detail)
        return session.snapshot()


@app.post("/game/reset", response_model=BoardState, summary="Start over")
def reset_game(session: GameSession = Depends(get_session)) -> BoardState:
    with session.lock:
        session.engine.reset()
        logger.info("Board reset")
        return session.snapshot()


@app.post("/game/reveal", response_model=BoardState, summary="(Un)peek at the solution")
def toggle_reveal(session: GameSession = Depends(get_session)) -> BoardState:
    with session.lock:
        session.engine.toggle_reveal()
        return session.snapshot()
