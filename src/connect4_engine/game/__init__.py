# Game module

from .zobrist import ZobristHasher
from .bitboard import BitBoard, other_player, NUM_COLS, PLAYABLE_ROWS, FULL_BOARD
from .render import render_board

__all__ = ['ZobristHasher', 'BitBoard', 'other_player', 'NUM_COLS', 'PLAYABLE_ROWS', 'FULL_BOARD', 'render_board']
