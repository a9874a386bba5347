from typing import List, Optional

from mancala_search.game.game import Game, INFINITY
from mancala_search.game.position import Position, SKIP


class Mancala(Game):
    """
    Kalah (mancala) rules.

    Board: pits_per_side pits per player plus one store each
    Stores: player 0 at cell 0, player 1 at cell pits_per_side + 1
    Actions: index of one of the mover's non-empty pits
    Win condition: a store holds more than half of all tokens
    """

    def __init__(self, pits_per_side=6):
        self.pits_per_side = pits_per_side
        self.cell_count = 2 * pits_per_side + 2
        self.stores = (0, pits_per_side + 1)

    def __repr__(self):
        return f"Mancala({self.pits_per_side} pits per side)"

    def store_of(self, player: int) -> int:
        return self.stores[player]

    def pits_of(self, player: int) -> range:
        """
        Pits owned by player: the ones following the opponent's store.

        Player 0 sows 8..13 into cell 0, player 1 sows 1..6 into cell 7.
        """
        first = self.store_of(1 - player) + 1
        return range(first, first + self.pits_per_side)

    def mirror(self, pit: int) -> int:
        return self.cell_count - pit

    def owned(self, position: Position, player: int) -> int:
        """Tokens that will end up with player if play stopped now."""
        cells = position.cells
        return cells[self.store_of(player)] + sum(cells[i] for i in self.pits_of(player))

    def legal_moves(self, position: Position) -> List[int]:
        """
        Returns the mover's non-empty pits in ascending index order.

        The order is fixed because the search keeps the first of several
        equally good moves.
        """
        cells = position.cells
        return [i for i in self.pits_of(position.player) if cells[i] > 0]

    def apply_move(self, position: Position, move: int) -> Position:
        """
        Sow the chosen pit and resolve capture and extra turn.

        Args:
            position: Position before the move
            move: Pit index, or SKIP

        Returns:
            New position (the input when move is SKIP)
        """
        if move == SKIP:
            return position

        player = position.player
        if move not in self.pits_of(player) or position.cells[move] == 0:
            raise ValueError(f"Illegal move {move} for player {player} in {position}")

        cells = list(position.cells)
        own_store = self.store_of(player)
        opponent_store = self.store_of(1 - player)

        seeds = cells[move]
        cells[move] = 0
        cell = move
        while seeds > 0:
            cell = (cell + 1) % self.cell_count
            if cell == opponent_store:
                continue
            cells[cell] += 1
            seeds -= 1

        # Last seed in an empty pit of our own: take it and the pit opposite
        if cell in self.pits_of(player) and cells[cell] == 1:
            opposite = self.mirror(cell)
            cells[own_store] += cells[cell] + cells[opposite]
            cells[cell] = 0
            cells[opposite] = 0

        next_player = player if cell == own_store else 1 - player
        return Position(next_player, cells)

    def terminal_value(self, position: Position, player: Optional[int] = None) -> int:
        """
        Check whether a store already holds a strict majority of the tokens.

        Returns:
            +INFINITY if player has won, -INFINITY if player has lost, 0 otherwise
        """
        if player is None:
            player = position.player
        total = position.total
        if 2 * position.cells[self.store_of(player)] > total:
            return INFINITY
        if 2 * position.cells[self.store_of(1 - player)] > total:
            return -INFINITY
        return 0

    def out_of_moves(self, position: Position) -> Position:
        """
        End-of-game sweep for a mover without legal moves.

        Every token left in a pit goes to the store of the player not to
        move. The side to move is unchanged.
        """
        cells = list(position.cells)
        receiver = self.store_of(1 - position.player)
        for i in range(self.cell_count):
            if i in self.stores:
                continue
            cells[receiver] += cells[i]
            cells[i] = 0
        return Position(position.player, cells)

    def evaluate(self, position: Position, player: Optional[int] = None) -> int:
        """
        Material balance: tokens owned by player minus tokens owned by the opponent.

        When the mover is stuck, out_of_moves must be applied first.
        """
        if player is None:
            player = position.player
        return self.owned(position, player) - self.owned(position, 1 - player)
