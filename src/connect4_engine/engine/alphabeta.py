"""
Alpha-beta negamax search engine for Connect4.

Key features:
- Negamax framework (simplified minimax using negation)
- Alpha-beta pruning (cut branches that can't affect final result)
- Iterative deepening (search depth 1, then 2, then 3... until time expires)
- Transposition table integration, reused across iterations of one search
- Center-first move ordering with the TT move tried first
- Time management (deadline polled at every node, search aborts cleanly)


Algorithm overview:

    def negamax(board, player, alpha, beta, depth):
        if time is up:
            return ABORTED

        # Transposition table lookup
        entry = tt.lookup(board.hash)
        if entry is not None and entry.depth >= depth:
            tighten alpha/beta, return entry.score on cutoff

        if opponent has four connected: return loss
        if board full: return draw
        if depth == 0: return board.evaluate_position(player)

        for column in ordered_columns:
            with board.moved(column, player):
                result = negamax(board, -player, -beta, -alpha, depth - 1)
            if result is ABORTED:
                return ABORTED
            ...
            if alpha >= beta:
                break  # Beta cutoff

        tt.store(board.hash, best_score, alpha, beta, depth, best_move)
        return best_score

The board is shared by the whole recursion and mutated in place; every move is
played inside `BitBoard.moved`, which undoes it on every exit path, including
an abort.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from connect4_engine.game.bitboard import BitBoard, other_player
from connect4_engine.engine.transposition_table import TranspositionTable, BoundType
from connect4_engine.engine.move_ordering import order_columns

logger = logging.getLogger(__name__)


# 69 four-in-a-row windows fit on the board, so heuristic scores stay below 69**2
MAX_SCORE = 70 ** 2
SCORE_DRAW = 0
SCORE_INF = MAX_SCORE + 1


class Aborted:
    """Search result meaning the deadline passed before the node was resolved."""

    def __repr__(self):
        return 'ABORTED'


ABORTED = Aborted()

SearchValue = Union[int, Aborted]


@dataclass
class SearchResult:
    """Result of alpha-beta search."""
    best_move: Optional[int]
    score: Optional[int]
    depth_reached: int
    completed_depth: int
    nodes_searched: int
    time_ms: int
    tt_stats: dict


class AlphaBetaEngine:
    """
    Alpha-beta negamax search engine with iterative deepening.

    One engine answers one move request: it owns a fresh transposition table
    keyed by the board's hashes and searches until the thinking time runs out
    or the remaining game tree has been searched exhaustively.
    """

    def __init__(
        self,
        board: BitBoard,
        player: int,
        thinking_time: float,
        seed: Optional[int] = None
    ):
        """
        Initialize alpha-beta engine.

        Args:
            board: Board to search, mutated during search and restored afterwards
            player: Player to move (1 or -1)
            thinking_time: Time budget in seconds
            seed: Seed for the random fallback move
        """
        self.board = board
        self.player = player
        self.thinking_time = thinking_time
        self.rng = np.random.default_rng(seed)

        self.tt = TranspositionTable()

        # Search statistics
        self.max_depth = 0
        self.completed_depth = 0
        self.nodes_searched = 0
        self.score: Optional[int] = None
        self.deadline = 0.0

    @property
    def evaluated_positions(self) -> int:
        return self.nodes_searched

    def search(self) -> SearchResult:
        """
        Main search entry point with iterative deepening.

        Strategy:
        - Search depth 1, then 2, then 3... until time expires
        - Stop once the depth covers every empty square (exhaustive)
        - An aborted iteration is discarded, the previous one stands

        Returns:
            SearchResult with best move, score, statistics
        """
        start = time.monotonic()
        self.deadline = start + self.thinking_time
        empty_squares = self.board.empty_squares()

        if empty_squares == 0:
            self.score = self._leaf_score(self.player, 0)

        while time.monotonic() < self.deadline and self.max_depth < empty_squares:
            self.max_depth += 1
            result = self._alpha_beta(self.player, -SCORE_INF, SCORE_INF, self.max_depth)
            if result is ABORTED:
                logger.debug("Depth %d aborted after %d nodes", self.max_depth, self.nodes_searched)
                break

            self.score = result
            self.completed_depth = self.max_depth
            logger.debug(
                "Depth %d: score=%d best=%s nodes=%d",
                self.max_depth, result, self.tt.get_best_move(self.board.hash), self.nodes_searched
            )

        best_move = self.best()
        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.info(
            "Player %d chose column %s after depth %d (%d completed), %d nodes in %dms",
            self.player, best_move, self.max_depth, self.completed_depth, self.nodes_searched, elapsed_ms
        )

        return SearchResult(
            best_move=best_move,
            score=self.score,
            depth_reached=self.max_depth,
            completed_depth=self.completed_depth,
            nodes_searched=self.nodes_searched,
            time_ms=elapsed_ms,
            tt_stats=self.tt.get_stats()
        )

    def best(self) -> Optional[int]:
        """
        Best column for the root position.

        Falls back to a random open column when no iteration finished.

        Returns:
            Column index, or None if the board has no open column
        """
        move = self.tt.get_best_move(self.board.hash)
        if move is not None and self.board.is_open(move):
            return move
        return self._random_move()

    def _random_move(self) -> Optional[int]:
        open_columns = self.board.open_columns()
        if not open_columns:
            return None
        return int(self.rng.choice(open_columns))

    def _leaf_score(self, player: int, depth: int) -> Optional[int]:
        """
        Score of a terminal or horizon node, None if the node must be expanded.

        Wins and losses are worth less the further they are from the root, so
        the search prefers the quickest win and the slowest loss.
        """
        if self.board.four_connected(other_player(player)):
            return -(MAX_SCORE - (self.max_depth - depth))
        if self.board.full():
            return SCORE_DRAW
        if depth == 0:
            return self.board.evaluate_position(player)
        return None

    def _alpha_beta(self, player: int, alpha: int, beta: int, depth: int) -> SearchValue:
        """
        Negamax alpha-beta search.

        Args:
            player: Player to move at this node
            alpha: Alpha bound
            beta: Beta bound
            depth: Remaining depth

        Returns:
            Score from `player`'s perspective, or ABORTED once the deadline passes
        """
        if time.monotonic() >= self.deadline:
            return ABORTED
        self.nodes_searched += 1

        board = self.board
        hash_val = board.hash
        alpha_orig, beta_orig = alpha, beta

        # Probe transposition table
        entry = self.tt.lookup(hash_val)
        if entry is not None and entry.depth >= depth:
            if entry.bound is BoundType.EXACT:
                return entry.score
            if entry.bound is BoundType.LOWER:
                alpha = max(alpha, entry.score)
            else:
                beta = min(beta, entry.score)
            if alpha >= beta:
                return entry.score

        score = self._leaf_score(player, depth)
        if score is not None:
            self.tt.store(hash_val, score, alpha_orig, beta_orig, depth, None)
            return score

        opponent = other_player(player)
        best_score = -SCORE_INF
        best_move = None
        tt_move = entry.best_move if entry is not None else None

        for column in order_columns(tt_move):
            if board.next_idx[column] is None:
                continue

            with board.moved(column, player):
                result = self._alpha_beta(opponent, -beta, -alpha, depth - 1)
            if result is ABORTED:
                return ABORTED

            score = -result
            if score > best_score:
                best_score = score
                best_move = column
                alpha = max(alpha, score)

            # Beta cutoff
            if alpha >= beta:
                break

        self.tt.store(hash_val, best_score, alpha_orig, beta_orig, depth, best_move)
        return best_score


def find_best_move(
    board: BitBoard,
    player: int,
    thinking_time: float,
    seed: Optional[int] = None
) -> SearchResult:
    """Run one engine search and return its result."""
    return AlphaBetaEngine(board, player, thinking_time, seed=seed).search()
