"""
Alpha-beta search engine for Connect4.

This module contains the search components:
- Transposition table for caching search results
- Center-first move ordering
- Alpha-beta negamax search with iterative deepening under a time budget
"""

from connect4_engine.engine.transposition_table import TranspositionTable, BoundType, TTEntry
from connect4_engine.engine.move_ordering import COLUMN_ORDER, order_columns
from connect4_engine.engine.alphabeta import (
    AlphaBetaEngine,
    SearchResult,
    ABORTED,
    MAX_SCORE,
    find_best_move,
)

__all__ = [
    'TranspositionTable',
    'BoundType',
    'TTEntry',
    'COLUMN_ORDER',
    'order_columns',
    'AlphaBetaEngine',
    'SearchResult',
    'ABORTED',
    'MAX_SCORE',
    'find_best_move',
]
