"""
The game itself: one secret, one board, one player.

GameEngine owns the whole state machine (no HTTP, no drawing). Callers
mutate it with set_cell/place/submit/reset/toggle_reveal and read it back
through the query methods. Out-of-turn calls are no-ops signalled by the
return value, never exceptions.

Anyone interested in changes registers a callback with subscribe(); each
successful mutation calls every callback exactly once, after the state is
fully updated and before the mutator returns.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from .config import CODE_LENGTH, EMPTY, MAX_GUESSES, PALETTE_SIZE
from .random_client import fetch_code
from .scoring import Feedback, is_win, score_guess, validate_code
from .types import Code, GameStatus, Marker

logger = logging.getLogger(__name__)

Observer = Callable[[], None]
CodeSource = Callable[[int], Code]


@dataclass
class HistoryEntry:
    guess: Tuple[int, ...]
    feedback: Feedback


@dataclass
class GameState:
    secret: Tuple[int, ...]
    history: List[HistoryEntry] = field(default_factory=list)
    pending: Optional[Code] = field(default_factory=lambda: [EMPTY] * CODE_LENGTH)
    guesses_used: int = 0
    revealed: bool = False
    victory: bool = False


class GameEngine:
    def __init__(self, code_source: Optional[CodeSource] = None) -> None:
        self._code_source = code_source
        self._observers: List[Observer] = []
        self._state = self._fresh_state()

    # --- Observers ---

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register a no-argument callback. Returns a function that removes it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer()

    # --- Lifecycle ---

    def _fresh_state(self) -> GameState:
        source = self._code_source or fetch_code
        secret = list(source(CODE_LENGTH))
        # a bad source is a programming error, not a game event
        validate_code(secret, CODE_LENGTH)
        logger.debug("New secret drawn: %s", secret)
        return GameState(secret=tuple(secret))

    def reset(self) -> None:
        self._state = self._fresh_state()
        logger.debug("Game reset")
        self._notify()

    # --- Mutators ---

    def _editable(self, row: int, column: int) -> bool:
        return (
            not self.is_over()
            and row == self._state.guesses_used
            and 0 <= column < CODE_LENGTH
        )

    def set_cell(self, row: int, column: int) -> bool:
        """
        Cycle one cell of the pending row: unset -> 1 -> ... -> 6 -> unset.
        Returns False (and changes nothing) for any row but the pending one,
        for a column off the board, or once the game is over.
        """
        if not self._editable(row, column):
            return False
        pending = self._state.pending
        pending[column] = (pending[column] + 1) % (PALETTE_SIZE + 1)
        self._notify()
        return True

    def place(self, row: int, column: int, symbol: int) -> bool:
        """Set a pending cell directly. Same guards as set_cell."""
        if not isinstance(symbol, int) or symbol < EMPTY or symbol > PALETTE_SIZE:
            raise ValueError(f"Symbol must be between {EMPTY} and {PALETTE_SIZE} inclusive.")
        if not self._editable(row, column):
            return False
        pending = self._state.pending
        if pending[column] == symbol:
            return False
        pending[column] = symbol
        self._notify()
        return True

    def can_submit(self) -> bool:
        pending = self._state.pending
        if self.is_over() or pending is None:
            return False
        return all(cell != EMPTY for cell in pending)

    def submit(self) -> Optional[Feedback]:
        """
        Score the pending row and move on to the next one.
        Returns the row's Feedback, or None when the row can't be submitted.
        """
        if not self.can_submit():
            return None

        state = self._state
        guess = tuple(state.pending)
        feedback = score_guess(list(state.secret), list(guess))

        state.history.append(HistoryEntry(guess=guess, feedback=feedback))
        state.guesses_used += 1
        state.victory = is_win(list(state.secret), list(guess))

        if state.guesses_used < MAX_GUESSES:
            state.pending = [EMPTY] * CODE_LENGTH
        else:
            state.pending = None

        logger.debug(
            "Guess %d/%d: %s -> black=%d white=%d",
            state.guesses_used, MAX_GUESSES, list(guess), feedback.black, feedback.white,
        )
        if self.is_over():
            logger.info("Game %s after %d guess(es)", self.status, state.guesses_used)

        self._notify()
        return feedback

    def toggle_reveal(self) -> bool:
        self._state.revealed = not self._state.revealed
        self._notify()
        return self._state.revealed

    # --- Queries ---

    @property
    def status(self) -> GameStatus:
        # a win on the last allowed guess is still a win
        if self._state.victory:
            return "won"
        if self._state.guesses_used >= MAX_GUESSES:
            return "lost"
        return "in_progress"

    def is_over(self) -> bool:
        return self.status != "in_progress"

    def is_victory(self) -> bool:
        return self._state.victory

    def remaining_guesses(self) -> int:
        return MAX_GUESSES - self._state.guesses_used

    @property
    def guesses_used(self) -> int:
        return self._state.guesses_used

    @property
    def revealed(self) -> bool:
        return self._state.revealed

    @property
    def history(self) -> Tuple[Tuple[Code, Feedback], ...]:
        return tuple((list(entry.guess), entry.feedback) for entry in self._state.history)

    @property
    def pending(self) -> Optional[Code]:
        if self._state.pending is None:
            return None
        return list(self._state.pending)

    def history_row(self, index: int) -> Tuple[Code, Optional[Feedback]]:
        """
        Row `index` of the board as (symbols, feedback):
        - submitted rows come with their feedback
        - the pending row shows its current cells, no feedback
        - rows not reached yet are all unset
        """
        if index < 0 or index >= MAX_GUESSES:
            raise IndexError(f"Row {index} is outside the board (0..{MAX_GUESSES - 1}).")
        state = self._state
        if index < state.guesses_used:
            entry = state.history[index]
            return list(entry.guess), entry.feedback
        if index == state.guesses_used and state.pending is not None:
            return list(state.pending), None
        return [EMPTY] * CODE_LENGTH, None

    def clue_row(self, index: int) -> List[Marker]:
        _, feedback = self.history_row(index)
        if feedback is None:
            return [" "] * CODE_LENGTH
        return feedback.markers(CODE_LENGTH)

    def solution(self) -> Code:
        """The secret while revealed; an all-unset placeholder otherwise."""
        if self._state.revealed:
            return list(self._state.secret)
        return [EMPTY] * CODE_LENGTH
