"""
Board position value type.

A Position is the complete game state: whose turn it is and the number of
tokens in every cell. It never changes after construction; rules return new
positions. Equality is structural and the hash is a Zobrist hash computed
once, so positions key the transposition table directly.

Default board (14 cells), player 0's store is cell 0, player 1's is cell 7:

        13 12 11 10  9  8
     0                     7
         1  2  3  4  5  6
"""

from dataclasses import dataclass, field
from typing import Tuple

from mancala_search.game.zobrist import MAX_CELL_COUNT, get_zobrist_hasher

# Sentinel move: "pass" for the side that is not being searched for
SKIP = -1


@dataclass(frozen=True)
class Position:
    player: int
    cells: Tuple[int, ...]
    _hash: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        cells = tuple(self.cells)
        if self.player not in (0, 1):
            raise ValueError(f"player must be 0 or 1, got {self.player!r}")
        for count in cells:
            if isinstance(count, bool) or not isinstance(count, int):
                raise ValueError(f"cell counts must be integers, got {count!r}")
            if count < 0 or count > MAX_CELL_COUNT:
                raise ValueError(
                    f"cell counts must be in 0..{MAX_CELL_COUNT}, got {count}"
                )
        object.__setattr__(self, 'cells', cells)
        object.__setattr__(
            self, '_hash',
            get_zobrist_hasher(len(cells)).hash_position(cells, self.player)
        )

    def __hash__(self):
        return self._hash

    @property
    def total(self) -> int:
        return sum(self.cells)

    def __str__(self):
        return f"P{self.player} [{' '.join(str(c) for c in self.cells)}]"

    def render(self) -> str:
        """Draw the board with player 0's pits on top, as in the module docstring."""
        side = (len(self.cells) - 2) // 2
        top = self.cells[side + 2:][::-1]
        bottom = self.cells[1:side + 1]
        store_0, store_1 = self.cells[0], self.cells[side + 1]
        width = 3 * side
        lines = [
            "    " + "".join(f"{c:3d}" for c in top),
            f"{store_0:3d} " + " " * width + f" {store_1:3d}",
            "    " + "".join(f"{c:3d}" for c in bottom),
            f"player {self.player} to move",
        ]
        return "\n".join(lines)


def initial_position(seeds_per_pit: int = 4, pits_per_side: int = 6, player: int = 0) -> Position:
    """Standard opening board: every pit holds the same number of seeds, stores empty."""
    pits = [seeds_per_pit] * pits_per_side
    return Position(player, [0] + pits + [0] + pits)
