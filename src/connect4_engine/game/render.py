"""Text rendering of a bitboard."""

from typing import Dict, Optional

from connect4_engine.game.bitboard import BitBoard, NUM_COLS, PLAYABLE_ROWS


DEFAULT_MARKERS = {1: 'X', -1: 'O', 0: '_'}


def render_board(board: BitBoard, markers: Optional[Dict[int, str]] = None) -> str:
    """
    Render the board top row first, framed, with 1-based column labels.

         ||_|_|_|_|_|_|_||
         ...
         ||X|O|_|_|_|_|_||
          =================
           1 2 3 4 5 6 7
    """
    symbols = dict(DEFAULT_MARKERS)
    if markers:
        symbols.update(markers)

    lines = []
    for row in range(PLAYABLE_ROWS - 1, -1, -1):
        cells = [symbols[board.cell(col, row)] for col in range(NUM_COLS)]
        lines.append(' ||' + '|'.join(cells) + '||')
    lines.append(' ' * 2 + '=' + '=' * (2 * NUM_COLS - 1) + '=')
    lines.append(' ' * 3 + ' '.join(str(col + 1) for col in range(NUM_COLS)))
    return '\n'.join(lines)
