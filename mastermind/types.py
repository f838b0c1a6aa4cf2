"""
Labels for clarity.
"""

from typing import List, Literal

Symbol = int  # 0 -> unset, 1..6 -> a palette color
Code = List[Symbol]  # one row of the board
GameStatus = Literal["in_progress", "won", "lost"]
Marker = Literal["B", "W", " "]  # exact, partial, blank
