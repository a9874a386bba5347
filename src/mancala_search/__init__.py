"""
mancala_search - alpha-beta game tree search demonstrated on Kalah.
"""

__version__ = "0.1.0"

from mancala_search.game.position import Position, SKIP, initial_position
from mancala_search.game.mancala import Mancala
from mancala_search.engine.cancellation import CancellationToken
from mancala_search.engine.alphabeta import AlphaBetaEngine, SearchResult

__all__ = [
    'Position',
    'SKIP',
    'initial_position',
    'Mancala',
    'CancellationToken',
    'AlphaBetaEngine',
    'SearchResult',
]
