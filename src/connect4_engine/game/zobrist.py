"""
Zobrist hashing for bitboard Connect4 positions.

Each (cell, player) pair gets a random 64-bit key. The hash of a position is
a random baseline XOR the keys of every occupied cell, so it can be updated
incrementally: placing a stone XORs its key in, removing it XORs the same key
out again.

Implementation:
- Keys are generated once per board from an explicitly seeded numpy RNG
- Cell indices follow the bitboard layout (idx = col * 7 + row, guard row included)
- Keys are stored as plain Python ints so XOR stays in arbitrary-precision land

Entries in a transposition table are only meaningful relative to the hasher
that produced them: never share a table between boards with different hashers.
"""

import numpy as np
from typing import Dict, Optional


class ZobristHasher:
    """
    Zobrist key table for one bitboard.

    Connect4 bitboard: 7 columns x 7 rows (6 playable + guard) x 2 players = 98 keys
    """

    def __init__(self, num_cells: int = 49, seed: Optional[int] = None):
        """
        Initialize Zobrist hash table with random 64-bit keys.

        Args:
            num_cells: Number of bit positions on the board (guard rows included)
            seed: Random seed, None for fresh entropy
        """
        self.num_cells = num_cells
        self.seed = seed

        rng = np.random.default_rng(seed)
        table = rng.integers(
            0, np.iinfo(np.uint64).max,
            size=(num_cells, 2),
            dtype=np.uint64,
            endpoint=True
        )

        # keys[idx][player_idx], player_idx: 0 for player=-1, 1 for player=1
        self.keys = table.tolist()
        self.initial_hash = int(rng.integers(0, np.iinfo(np.uint64).max, dtype=np.uint64, endpoint=True))

    @staticmethod
    def player_index(player: int) -> int:
        return 0 if player == -1 else 1

    def key(self, idx: int, player: int) -> int:
        return self.keys[idx][self.player_index(player)]

    def apply(self, current_hash: int, idx: int, player: int) -> int:
        """Hash after placing a stone of `player` at cell `idx`."""
        return current_hash ^ self.keys[idx][0 if player == -1 else 1]

    def undo(self, current_hash: int, idx: int, player: int) -> int:
        """Hash after removing the stone again (XOR is its own inverse)."""
        return current_hash ^ self.keys[idx][0 if player == -1 else 1]

    def hash_position(self, positions: Dict[int, int]) -> int:
        """
        Compute the hash from scratch.

        Args:
            positions: Mapping player -> occupancy bitmask

        Returns:
            64-bit hash value (int)
        """
        hash_value = self.initial_hash
        for player, mask in positions.items():
            idx = 0
            while mask:
                if mask & 1:
                    hash_value ^= self.key(idx, player)
                mask >>= 1
                idx += 1
        return hash_value

    def verify_hash(self, positions: Dict[int, int], claimed_hash: int) -> bool:
        """
        Verify that an incrementally maintained hash matches the occupancy.

        Useful for debugging make/unmake mismatches.
        """
        return self.hash_position(positions) == claimed_hash
