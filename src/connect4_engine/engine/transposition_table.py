"""
Transposition table for caching alpha-beta search results.

The table maps a position's Zobrist hash to the result of the last search of
that position. It lives for a single move decision: iterative deepening
reuses entries from depth D-1 when searching depth D, then the whole table is
thrown away.

Key concepts:
- Bound types: EXACT (score inside the window), LOWER (fail-high, true value >= score),
  UPPER (fail-low, true value <= score)
- Replacement policy: always replace, the newest store for a hash wins
- No eviction: the table grows for the duration of one search
- Entries are keyed by hashes from one ZobristHasher and mean nothing to a board
  built with another
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class BoundType(Enum):
    """Type of bound stored in transposition table entry."""
    EXACT = 0   # Exact value (searched inside the alpha-beta window)
    LOWER = 1   # Lower bound (beta cutoff, actual value >= stored value)
    UPPER = 2   # Upper bound (failed low, actual value <= stored value)


@dataclass
class TTEntry:
    """
    Transposition table entry storing cached search results.

    Attributes:
        score: Evaluation score (or bound)
        bound: Type of bound (EXACT/LOWER/UPPER)
        depth: Remaining search depth when this entry was stored
        best_move: Best column found at this position (None for leaves)
    """
    score: int
    bound: BoundType
    depth: int
    best_move: Optional[int]


class TranspositionTable:
    """
    Unbounded hash -> TTEntry mapping for one search.

    Callers must compare entry.depth with the depth they need before trusting
    a cutoff; the best move is usable for ordering at any depth.
    """

    def __init__(self):
        self.table: Dict[int, TTEntry] = {}

        # Statistics
        self.hits = 0
        self.misses = 0
        self.stores = 0

    def __len__(self):
        return len(self.table)

    def lookup(self, zobrist_hash: int) -> Optional[TTEntry]:
        """
        Most recent entry stored for this hash, whatever depth it was searched to.
        """
        entry = self.table.get(zobrist_hash)
        if entry is None:
            self.misses += 1
        else:
            self.hits += 1
        return entry

    def store(
        self,
        zobrist_hash: int,
        score: int,
        alpha: int,
        beta: int,
        depth: int,
        best_move: Optional[int]
    ):
        """
        Store search result, classifying it against the window it was searched with.

        Args:
            zobrist_hash: Position hash
            score: Search result
            alpha: Alpha bound at node entry
            beta: Beta bound at node entry
            depth: Remaining search depth
            best_move: Best column found (None if leaf or terminal)
        """
        if score <= alpha:
            bound = BoundType.UPPER
        elif score >= beta:
            bound = BoundType.LOWER
        else:
            bound = BoundType.EXACT

        self.table[zobrist_hash] = TTEntry(
            score=score,
            bound=bound,
            depth=depth,
            best_move=best_move
        )
        self.stores += 1

    def get_best_move(self, zobrist_hash: int) -> Optional[int]:
        """
        Retrieve best move without depth or bound checking.

        Useful for move ordering and for picking the move at the root.
        """
        entry = self.table.get(zobrist_hash)
        return entry.best_move if entry is not None else None

    def clear(self):
        """Clear all entries and statistics."""
        self.table = {}
        self.hits = 0
        self.misses = 0
        self.stores = 0

    def get_stats(self) -> dict:
        """
        Get transposition table statistics.

        Returns:
            Dictionary with hits, misses, hit rate, stores and entry count
        """
        total_queries = self.hits + self.misses
        hit_rate = self.hits / total_queries if total_queries > 0 else 0.0

        return {
            'hits': self.hits,
            'misses': self.misses,
            'hit_rate': hit_rate,
            'stores': self.stores,
            'size_entries': len(self.table),
        }
