"""
Packed bitboard representation of a Connect4 position.

Each player's stones are one Python int with a bit per cell:

    6 13 20 27 34 41 48   <- guard row, always 0
    5 12 19 26 33 40 47
    4 11 18 25 32 39 46
    3 10 17 24 31 38 45
    2  9 16 23 30 37 44
    1  8 15 22 29 36 43
    0  7 14 21 28 35 42

idx = col * NUM_ROWS + row, row counted from the bottom. The guard row stops
shift-based line tests from wrapping a stone from the top of one column into
the bottom of the next.
"""

from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

import numpy as np

from connect4_engine.game.zobrist import ZobristHasher


NUM_COLS = 7
NUM_ROWS = 7            # including the guard row
PLAYABLE_ROWS = NUM_ROWS - 1
NUM_CELLS = NUM_COLS * NUM_ROWS

# Shift per direction
HORIZONTAL = NUM_ROWS
VERTICAL = 1
DIAG_UP_RIGHT = HORIZONTAL + VERTICAL
DIAG_DOWN_RIGHT = HORIZONTAL - VERTICAL
DIRECTIONS = (HORIZONTAL, VERTICAL, DIAG_UP_RIGHT, DIAG_DOWN_RIGHT)

FULL_BOARD = sum(
    1 << (col * NUM_ROWS + row)
    for col in range(NUM_COLS)
    for row in range(PLAYABLE_ROWS)
)

# Index of the topmost playable cell in each column
LIMITS = [col * NUM_ROWS + PLAYABLE_ROWS - 1 for col in range(NUM_COLS)]

PLAYERS = (1, -1)


def other_player(player: int) -> int:
    return -player


def popcount(mask: int) -> int:
    return bin(mask).count('1')


class BitBoard:
    """
    Two disjoint occupancy masks plus per-column fill cursors.

    The board owns its Zobrist hasher; `hash` always reflects the current
    occupancy as long as every change goes through make_move/unmake_move.
    """

    def __init__(self, hasher: Optional[ZobristHasher] = None, seed: Optional[int] = None):
        """
        Args:
            hasher: Zobrist key table to use (a fresh one is built if omitted)
            seed: Seed for the fresh hasher, ignored when `hasher` is given
        """
        self.hasher = hasher if hasher is not None else ZobristHasher(NUM_CELLS, seed=seed)
        self.positions: Dict[int, int] = {1: 0, -1: 0}
        self.next_idx: List[Optional[int]] = [col * NUM_ROWS for col in range(NUM_COLS)]
        self.hash = self.hasher.initial_hash

    def __repr__(self):
        return f"BitBoard(X={self.positions[1]:#x}, O={self.positions[-1]:#x}, empty={self.empty_squares()})"

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def is_open(self, column: int) -> bool:
        return 0 <= column < NUM_COLS and self.next_idx[column] is not None

    def open_columns(self) -> List[int]:
        return [col for col in range(NUM_COLS) if self.next_idx[col] is not None]

    def make_move(self, column: int, player: int):
        """
        Drop a stone for `player` into `column`.

        Raises:
            ValueError: if the column is out of range or already full
        """
        if not 0 <= column < NUM_COLS:
            raise ValueError(f"Column {column} is out of range")
        idx = self.next_idx[column]
        if idx is None:
            raise ValueError(f"Column {column} is full")

        self.positions[player] |= 1 << idx
        self.next_idx[column] = None if idx == LIMITS[column] else idx + 1
        self.hash = self.hasher.apply(self.hash, idx, player)

    def unmake_move(self, column: int, player: int):
        """
        Undo the most recent make_move(column, player).

        Raises:
            ValueError: if the top stone of the column does not belong to `player`
        """
        cursor = self.next_idx[column]
        idx = LIMITS[column] if cursor is None else cursor - 1
        if idx < column * NUM_ROWS or not self.positions[player] & (1 << idx):
            raise ValueError(f"No stone of player {player} on top of column {column}")

        self.positions[player] ^= 1 << idx
        self.next_idx[column] = idx
        self.hash = self.hasher.undo(self.hash, idx, player)

    @contextmanager
    def moved(self, column: int, player: int) -> Iterator["BitBoard"]:
        """Play a move for the duration of the block, undoing it on every exit path."""
        self.make_move(column, player)
        try:
            yield self
        finally:
            self.unmake_move(column, player)

    # ------------------------------------------------------------------
    # Terminal checks
    # ------------------------------------------------------------------

    def four_connected(self, player: int) -> bool:
        positions = self.positions[player]
        for shift in DIRECTIONS:
            pairs = positions & (positions >> shift)
            if pairs & (pairs >> (2 * shift)):
                return True
        return False

    def full(self) -> bool:
        return (self.positions[1] | self.positions[-1]) == FULL_BOARD

    def empty_squares(self) -> int:
        return popcount((self.positions[1] | self.positions[-1]) ^ FULL_BOARD)

    # ------------------------------------------------------------------
    # Heuristic evaluation
    # ------------------------------------------------------------------

    def open_winning_positions(self, player: int) -> int:
        """
        Count four-cell line windows the opponent has not blocked.

        There are 69 such windows on an empty board.
        """
        non_blocked = FULL_BOARD ^ self.positions[other_player(player)]
        total = 0
        for shift in DIRECTIONS:
            pairs = non_blocked & (non_blocked >> shift)
            total += popcount(pairs & (pairs >> (2 * shift)))
        return total

    def evaluate_position(self, player: int) -> int:
        """Zero-sum score: squared open windows for `player` minus the opponent's."""
        return (
            self.open_winning_positions(player) ** 2
            - self.open_winning_positions(other_player(player)) ** 2
        )

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    def cell(self, column: int, row: int) -> int:
        """Occupant of (column, row): 1, -1 or 0 for empty. Row 0 is the bottom."""
        bit = 1 << (column * NUM_ROWS + row)
        if self.positions[1] & bit:
            return 1
        if self.positions[-1] & bit:
            return -1
        return 0

    def to_array(self) -> np.ndarray:
        """
        Board as a (6, 7) array with the top row first and values in {-1, 0, 1}.
        """
        state = np.zeros((PLAYABLE_ROWS, NUM_COLS), dtype=np.int8)
        for col in range(NUM_COLS):
            for row in range(PLAYABLE_ROWS):
                state[PLAYABLE_ROWS - 1 - row, col] = self.cell(col, row)
        return state
