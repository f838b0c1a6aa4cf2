"""
Pure scoring logic (no state, no observers).
We compute two feedback numbers for each guess:
- black: how many positions are exactly correct (right color, right place)
- white: how many of the remaining colors also appear in the secret,
  ignoring position, once the black positions are taken out of both sides.

Duplicates are allowed in the secret and in guesses, so white is a capped
multiset overlap: two reds in the guess match at most as many reds as are
left in the secret.
"""

from dataclasses import dataclass
from typing import List, Sequence

from .config import PALETTE_SIZE
from .types import Code, Marker


@dataclass(frozen=True)
class Feedback:
    black: int
    white: int

    def markers(self, length: int) -> List[Marker]:
        """
        Display form: black "B" markers, then white "W" markers, then blanks.
        The slot a marker lands in says nothing about which column matched.
        """
        blanks = length - self.black - self.white
        return ["B"] * self.black + ["W"] * self.white + [" "] * blanks


def validate_code(code: Sequence[int], length: int) -> None:
    """Raise ValueError unless code is `length` set symbols (1..PALETTE_SIZE)."""
    if len(code) != length:
        raise ValueError(f"Code must have exactly {length} symbols, got {len(code)}.")
    for symbol in code:
        if symbol < 1 or symbol > PALETTE_SIZE:
            raise ValueError(f"Symbol {symbol} is outside the palette 1..{PALETTE_SIZE}.")


def score_guess(secret: Code, guess: Code) -> Feedback:
    """
    Example:
      secret = [1, 1, 2, 3]
      guess  = [1, 2, 2, 2]
      black = 2  (positions 0 and 2)
      white = 0  (left over: secret 1, 3 vs guess 2, 2 -> nothing shared)
    """

    # 0. Validate both sides
    n = len(secret)
    if n == 0:
        raise ValueError("Secret and guess must be the same non-zero length.")
    validate_code(secret, n)
    validate_code(guess, n)

    # 1. Exact position matches; tally the leftovers per color
    black = 0
    secret_counts = [0] * (PALETTE_SIZE + 1)
    guess_counts = [0] * (PALETTE_SIZE + 1)
    for s, g in zip(secret, guess):
        if s == g:
            black += 1
        else:
            secret_counts[s] += 1
            guess_counts[g] += 1

    # 2. Overlap of the leftovers is the sum of the smaller count per color
    white = 0
    for color in range(1, PALETTE_SIZE + 1):
        white += min(secret_counts[color], guess_counts[color])

    return Feedback(black=black, white=white)


def is_win(secret: Code, guess: Code) -> bool:
    """
    Win = all symbols match in order.
    Codes of different (or zero) length never win.
    """
    n = len(secret)
    if n == 0 or len(guess) != n:
        return False
    return all(s == g for s, g in zip(secret, guess))
