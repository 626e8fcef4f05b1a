"""
Move ordering for alpha-beta search.

Columns are searched center first (3, 2, 4, 1, 5, 0, 6): central stones take
part in more four-in-a-row windows, so they tend to produce early cutoffs.
The best move remembered in the transposition table for a position, if any,
is promoted to the front.
"""

from typing import List, Optional

from connect4_engine.game.bitboard import NUM_COLS


COLUMN_ORDER = sorted(range(NUM_COLS), key=lambda col: abs(NUM_COLS // 2 - col))

_PROMOTED = {
    move: [move] + [col for col in COLUMN_ORDER if col != move]
    for move in COLUMN_ORDER
}


def order_columns(tt_move: Optional[int] = None) -> List[int]:
    """
    Column search order for a node.

    Args:
        tt_move: Best move from the transposition table (highest priority)

    Returns:
        All column indices, best candidates first. Full columns are not filtered.
    """
    if tt_move is None:
        return COLUMN_ORDER
    return _PROMOTED[tt_move]
