"""
Game rules the engine searches over.
"""

from mancala_search.game.game import Game, INFINITY
from mancala_search.game.position import Position, SKIP, initial_position
from mancala_search.game.mancala import Mancala

__all__ = [
    'Game',
    'INFINITY',
    'Position',
    'SKIP',
    'initial_position',
    'Mancala',
]
