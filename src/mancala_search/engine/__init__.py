"""
Alpha-beta search engine.

This module contains the engine components:
- Transposition table for caching search results
- Alpha-beta negamax search with iterative deepening
- Cancellation token polled by the search
"""

from mancala_search.engine.transposition_table import TranspositionTable, BoundType, TTEntry
from mancala_search.engine.cancellation import CancellationToken
from mancala_search.engine.alphabeta import (
    AlphaBetaEngine,
    IterationResult,
    SearchResult,
    Variation,
)

__all__ = [
    'TranspositionTable',
    'BoundType',
    'TTEntry',
    'CancellationToken',
    'AlphaBetaEngine',
    'IterationResult',
    'SearchResult',
    'Variation',
]
