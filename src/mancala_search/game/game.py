from abc import ABC, abstractmethod

# Value of a decided game; larger than any static evaluation
INFINITY = 1_000_000


class Game(ABC):
    """
    Abstract Base Class for a two-player, perfect-information game the
    alpha-beta engine can search.

    Players are 0 and 1. Values are integers from a given player's
    perspective and negate when the perspective changes.
    """

    @abstractmethod
    def legal_moves(self, position):
        """
        Returns the moves available to the side to move, in a fixed order.
        """
        pass

    @abstractmethod
    def apply_move(self, position, move):
        """
        Returns the position reached by playing move. Must not modify position.
        """
        pass

    @abstractmethod
    def terminal_value(self, position, player=None):
        """
        Returns +INFINITY / -INFINITY if the game is decided for / against
        player, 0 if it is still open.
        """
        pass

    @abstractmethod
    def out_of_moves(self, position):
        """
        Returns the final position when the side to move cannot move.
        """
        pass

    @abstractmethod
    def evaluate(self, position, player=None):
        """
        Returns a static estimate of the position for player.
        """
        pass

    def get_opponent(self, player):
        return 1 - player
