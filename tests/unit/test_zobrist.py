"""
Unit tests for Zobrist hashing of bitboards.
"""

import numpy as np
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from connect4_engine.game.bitboard import BitBoard, NUM_CELLS
from connect4_engine.game.zobrist import ZobristHasher


class TestZobristHashing:
    """Test Zobrist hashing correctness."""

    def test_seeded_tables_are_reproducible(self):
        """Same seed gives the same keys and baseline."""
        first = ZobristHasher(NUM_CELLS, seed=42)
        second = ZobristHasher(NUM_CELLS, seed=42)
        other = ZobristHasher(NUM_CELLS, seed=43)

        assert first.keys == second.keys
        assert first.initial_hash == second.initial_hash
        assert first.keys != other.keys

    def test_keys_are_64_bit_ints(self):
        hasher = ZobristHasher(NUM_CELLS, seed=1)
        assert len(hasher.keys) == NUM_CELLS
        for pair in hasher.keys:
            assert len(pair) == 2
            for key in pair:
                assert isinstance(key, int)
                assert 0 <= key < 2 ** 64
        assert 0 <= hasher.initial_hash < 2 ** 64

    def test_apply_undo_round_trip(self):
        hasher = ZobristHasher(NUM_CELLS, seed=5)
        value = hasher.initial_hash
        after = hasher.apply(value, 21, 1)
        assert after != value
        assert hasher.undo(after, 21, 1) == value

    def test_players_have_independent_keys(self):
        hasher = ZobristHasher(NUM_CELLS, seed=5)
        assert hasher.key(21, 1) != hasher.key(21, -1)

    def test_hash_uniqueness(self):
        """Different positions should have different hashes."""
        board = BitBoard(seed=9)
        hash1 = board.hash
        board.make_move(3, 1)
        hash2 = board.hash
        board.make_move(3, -1)
        hash3 = board.hash

        assert hash1 != hash2
        assert hash2 != hash3
        assert hash1 != hash3

    def test_incremental_hash_matches_recomputation(self):
        """Incremental hash should match full recomputation after any move sequence."""
        rng = np.random.default_rng(0)
        for _ in range(50):
            board = BitBoard(seed=17)
            player = 1
            for _ in range(int(rng.integers(1, 42))):
                columns = board.open_columns()
                if not columns:
                    break
                board.make_move(int(rng.choice(columns)), player)
                player = -player
                assert board.hasher.verify_hash(board.positions, board.hash)

    def test_transpositions_share_a_hash(self):
        """Move order does not matter, only the occupancy."""
        hasher = ZobristHasher(NUM_CELLS, seed=21)
        first = BitBoard(hasher=hasher)
        second = BitBoard(hasher=hasher)

        for column, player in [(3, 1), (2, -1), (4, 1), (5, -1)]:
            first.make_move(column, player)
        for column, player in [(4, 1), (5, -1), (3, 1), (2, -1)]:
            second.make_move(column, player)

        assert first.hash == second.hash

    def test_collision_rate(self):
        """Hash collisions should be rare on random positions."""
        rng = np.random.default_rng(3)
        hasher = ZobristHasher(NUM_CELLS, seed=99)
        hashes = {}

        for _ in range(2000):
            board = BitBoard(hasher=hasher)
            player = 1
            for _ in range(int(rng.integers(10, 21))):
                board.make_move(int(rng.choice(board.open_columns())), player)
                player = -player
            key = (board.positions[1], board.positions[-1])
            hashes.setdefault(board.hash, set()).add(key)

        assert all(len(positions) == 1 for positions in hashes.values())
