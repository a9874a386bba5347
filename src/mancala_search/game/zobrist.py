"""
Zobrist hashing for mancala positions.

Positions are used directly as transposition table keys, so their hash is
computed once per position and has to be cheap and well spread. Zobrist
hashing gives both:
- Pre-generate a random 64-bit key for each (cell, count) combination
- Hash = XOR of the keys selected by the current cell counts
- Side-to-move key XORed in when player 1 is to move
"""

import numpy as np
from typing import Dict, Sequence, Tuple

MAX_CELL_COUNT = 255


class ZobristHasher:
    """
    Zobrist hashing for seed-sowing boards.

    Default board: 14 cells × 256 possible counts = 3584 zobrist keys.

    Features:
    - Deterministic hash generation (seeded RNG for reproducibility)
    - One vectorised XOR reduction per position
    - Collisions are harmless: dict lookups fall back to full equality
    """

    def __init__(self, cell_count: int = 14, max_count: int = MAX_CELL_COUNT, seed: int = 42):
        """
        Initialize Zobrist hash table with random 64-bit keys.

        Args:
            cell_count: Number of cells on the board (pits and stores)
            max_count: Largest count a single cell may hold
            seed: Random seed for reproducibility
        """
        self.cell_count = cell_count
        self.max_count = max_count

        rng = np.random.RandomState(seed)

        # Generate zobrist keys: [cell, count]
        self.zobrist_table = rng.randint(
            0, 2**63 - 1,
            size=(cell_count, max_count + 1),
            dtype=np.uint64
        )
        # Count 0 contributes nothing, so empty boards hash alike per side
        self.zobrist_table[:, 0] = 0

        self.side_to_move_hash = int(rng.randint(0, 2**63 - 1, dtype=np.uint64))
        self._cells = np.arange(cell_count)

    def hash_position(self, cells: Sequence[int], player: int = 0) -> int:
        """
        Compute Zobrist hash for a board.

        Args:
            cells: Count per cell, length cell_count
            player: Player to move (0 or 1)

        Returns:
            64-bit hash value (int)
        """
        if len(cells) != self.cell_count:
            raise ValueError(
                f"Expected {self.cell_count} cells, got {len(cells)}"
            )
        keys = self.zobrist_table[self._cells, np.asarray(cells, dtype=np.intp)]
        hash_value = int(np.bitwise_xor.reduce(keys))

        if player == 1:
            hash_value ^= self.side_to_move_hash

        return hash_value


# One hasher per (board size, seed)
_hashers: Dict[Tuple[int, int], ZobristHasher] = {}


def get_zobrist_hasher(cell_count: int = 14, seed: int = 42) -> ZobristHasher:
    """
    Get or create the shared Zobrist hasher for a board size and seed.

    This ensures every Position of a given size hashes with the same table.
    """
    key = (cell_count, seed)
    hasher = _hashers.get(key)
    if hasher is None:
        hasher = ZobristHasher(cell_count, seed=seed)
        _hashers[key] = hasher
    return hasher
