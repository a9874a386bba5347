"""
Transposition table for caching alpha-beta search results.

The transposition table stores previously computed positions to avoid redundant
work during alpha-beta search. Iterative deepening reuses the same table, so
bounds found at depth D-1 narrow the window when searching depth D.

Key concepts:
- Bound types: EXACT (PV node), LOWER (fail-high/beta cutoff), UPPER (fail-low/alpha cutoff)
- Keys are positions themselves, so there are no hash collisions to detect
- Replacement policy: last write wins; depth is re-checked on every lookup
- No eviction: the table lives for one search and is cleared by the next
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from mancala_search.game.position import Position


class BoundType(Enum):
    """Type of bound stored in transposition table entry."""
    EXACT = 0   # Exact value (PV node, searched with full window)
    LOWER = 1   # Lower bound (beta cutoff, actual value >= stored value)
    UPPER = 2   # Upper bound (alpha cutoff, actual value <= stored value)


@dataclass
class TTEntry:
    """
    Transposition table entry storing cached search results.

    Attributes:
        bound: Type of bound (EXACT/LOWER/UPPER)
        value: Score (or bound) from the perspective of the side to move
        depth: Remaining depth when this entry was stored
        pv: Line that produced the value
    """
    bound: BoundType
    value: int
    depth: int
    pv: Tuple[int, ...] = ()


class TranspositionTable:
    """
    Unbounded position -> entry map.

    Memory grows with the number of distinct positions searched; callers
    that keep an engine alive across many searches rely on clear().
    """

    def __init__(self):
        self.table: Dict[Position, TTEntry] = {}

        # Statistics
        self.hits = 0
        self.misses = 0
        self.stores = 0

    def __len__(self):
        return len(self.table)

    def __contains__(self, position):
        return position in self.table

    def lookup(self, position: Position, depth: int) -> Optional[TTEntry]:
        """
        Probe transposition table for a cached result.

        Args:
            position: Position to look up
            depth: Remaining depth the caller still has to search

        Returns:
            The entry if present and searched at least as deep, None otherwise
        """
        entry = self.table.get(position)
        if entry is None or entry.depth < depth:
            self.misses += 1
            return None
        self.hits += 1
        return entry

    def store(
        self,
        position: Position,
        bound: BoundType,
        value: int,
        depth: int,
        pv: Tuple[int, ...] = ()
    ):
        """
        Store search result, replacing whatever was there.

        Args:
            position: Position searched
            bound: Type of bound
            value: Score or bound
            depth: Remaining depth searched
            pv: Line that produced the value
        """
        self.table[position] = TTEntry(bound=bound, value=value, depth=depth, pv=tuple(pv))
        self.stores += 1

    def clear(self):
        """Clear all entries (use between searches)."""
        self.table.clear()
        self._reset_stats()

    def _reset_stats(self):
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
