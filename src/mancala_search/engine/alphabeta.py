"""
Alpha-beta negamax search engine.

Key features:
- Negamax framework (simplified minimax using negation)
- Alpha-beta pruning (cut branches that can't affect final result)
- Iterative deepening (search depth 0, then 1, then 2... until stopped)
- Transposition table shared by all depths of one search
- Cooperative cancellation (keep the last completed depth when interrupted)
- Principal variation extraction

Turns and depth:

Each call carries a nominal player, the side whose move is being chosen at
that node. It alternates on every call, while the side to move on the board
only changes when a move does not end in the mover's store. When the two
disagree (the previous mover earned an extra turn) the node passes with a
single SKIP move that costs no depth, so the recursion stays strictly
alternating and every real move costs one ply.

Algorithm overview:

    def negamax(position, depth, player, alpha, beta):
        if cancelled:
            return None
        if player is to move and tt has a deep enough entry:
            narrow (alpha, beta), return the entry if the window closes
        if decided or depth == 0:
            return static value for player
        moves = legal moves, or [SKIP] if player is not to move
        for move in moves:
            value = -negamax(child, depth - cost(move), other, -beta, -alpha)
            keep the first best value and its line
            if alpha >= beta:
                break  # Beta cutoff
        store (value, bound, depth, line) in tt
        return value, line
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, List, NamedTuple, Optional, Tuple

from mancala_search.config_mancala import SEARCH_CONFIG
from mancala_search.engine.cancellation import CancellationToken
from mancala_search.engine.transposition_table import TranspositionTable, BoundType
from mancala_search.game.game import Game, INFINITY
from mancala_search.game.position import Position, SKIP

logger = logging.getLogger(__name__)


class Variation(NamedTuple):
    """Completed search of one node: value for the nominal player and the line behind it."""
    value: int
    pv: Tuple[int, ...]


@dataclass
class IterationResult:
    """One completed depth of iterative deepening."""
    depth: int
    value: int
    pv: Tuple[int, ...]
    nodes_searched: int
    time_ms: int


@dataclass
class SearchResult:
    """Result of an iterative deepening search."""
    best_move: Optional[int]
    score: int
    depth_reached: Optional[int]
    nodes_searched: int
    time_ms: int
    principal_variation: Tuple[int, ...]
    cancelled: bool
    tt_stats: dict
    iterations: List[IterationResult] = field(default_factory=list)


class AlphaBetaEngine:
    """
    Alpha-beta negamax search engine with iterative deepening.

    The engine is single-threaded. Only the cancellation token may be
    touched from outside while a search runs.
    """

    def __init__(
        self,
        game: Game,
        max_depth: int = SEARCH_CONFIG['max_depth'],
        use_transposition_table: bool = SEARCH_CONFIG['use_transposition_table'],
    ):
        """
        Initialize alpha-beta engine.

        Args:
            game: Rules of the game to search
            max_depth: Deepest iteration of iterative deepening
            use_transposition_table: Probe and fill the table during search
        """
        self.game = game
        self.max_depth = max_depth
        self.use_transposition_table = use_transposition_table

        self.tt = TranspositionTable()
        self.cancel = CancellationToken()

        # Search statistics
        self.nodes_searched = 0
        self.start_time = 0.0

    def search(
        self,
        position: Position,
        cancel: Optional[CancellationToken] = None,
        max_depth: Optional[int] = None,
        on_iteration: Optional[Callable[[IterationResult], None]] = None,
    ) -> SearchResult:
        """
        Main search entry point with iterative deepening.

        Strategy:
        - Search depth 0, then 1, then 2... up to max_depth
        - Always keep the result of the last completed depth
        - A depth interrupted by cancellation is discarded

        Args:
            position: Root position
            cancel: Token checked at every node (default: never cancelled)
            max_depth: Override maximum depth
            on_iteration: Called after every completed depth

        Returns:
            SearchResult for the deepest completed depth
        """
        self.start_time = time.time() * 1000
        self.cancel = cancel if cancel is not None else CancellationToken()
        self.nodes_searched = 0
        self.clear_tt()

        effective_max_depth = max_depth if max_depth is not None else self.max_depth
        root_has_moves = bool(self.game.legal_moves(position))
        if not root_has_moves:
            logger.debug("No legal moves at the root: %s", position)

        best: Optional[Variation] = None
        depth_reached = None
        iterations = []
        cancelled = False

        for depth in range(effective_max_depth + 1):
            if self.cancel.is_cancelled():
                cancelled = True
                break

            result = self._negamax(position, depth, position.player, -INFINITY, INFINITY)
            if result is None:
                logger.info("Search cancelled during depth %d", depth)
                cancelled = True
                break

            best = result
            depth_reached = depth
            iteration = IterationResult(
                depth=depth,
                value=result.value,
                pv=result.pv,
                nodes_searched=self.nodes_searched,
                time_ms=self._elapsed_ms(),
            )
            iterations.append(iteration)
            logger.debug(
                "depth %d: value=%d pv=%s nodes=%d", depth, result.value, result.pv, self.nodes_searched
            )
            if on_iteration is not None:
                on_iteration(iteration)

            # Stop if the game is already decided
            if abs(result.value) >= INFINITY:
                logger.info("Decided at depth %d (value %d)", depth, result.value)
                break
            # Nothing to choose: the sweep result will not change with depth
            if not root_has_moves and depth >= 1:
                break

        pv = best.pv if best is not None else ()
        return SearchResult(
            best_move=pv[0] if pv else None,
            score=best.value if best is not None else 0,
            depth_reached=depth_reached,
            nodes_searched=self.nodes_searched,
            time_ms=self._elapsed_ms(),
            principal_variation=pv,
            cancelled=cancelled,
            tt_stats=self.tt.get_stats(),
            iterations=iterations,
        )

    def search_depth(
        self,
        position: Position,
        depth: int,
        cancel: Optional[CancellationToken] = None,
    ) -> Optional[Variation]:
        """
        Single fixed-depth search from the root with a full window.

        Uses (and fills) the engine's current transposition table.

        Returns:
            Variation, or None if cancelled
        """
        self.cancel = cancel if cancel is not None else CancellationToken()
        return self._negamax(position, depth, position.player, -INFINITY, INFINITY)

    def _negamax(
        self,
        position: Position,
        depth: int,
        player: int,
        alpha: int,
        beta: int,
    ) -> Optional[Variation]:
        """
        Negamax alpha-beta search.

        Args:
            position: Position to search
            depth: Remaining depth (real moves only)
            player: Nominal player; the value is from this player's perspective
            alpha: Alpha bound
            beta: Beta bound

        Returns:
            Variation, or None if cancelled
        """
        if self.cancel.is_cancelled():
            return None
        self.nodes_searched += 1

        game = self.game
        # Pass-through nodes neither probe nor store: table values are always
        # from the side to move
        to_move = position.player == player
        use_tt = to_move and self.use_transposition_table
        original_alpha = alpha

        if use_tt:
            entry = self.tt.lookup(position, depth)
            if entry is not None:
                if entry.bound is BoundType.EXACT:
                    return Variation(entry.value, entry.pv)
                if entry.bound is BoundType.LOWER:
                    alpha = max(alpha, entry.value)
                else:
                    beta = min(beta, entry.value)
                if alpha >= beta:
                    return Variation(entry.value, entry.pv)

        decided = game.terminal_value(position, player)
        if decided != 0:
            return Variation(decided, ())

        if depth == 0:
            return Variation(game.evaluate(position, player), ())

        if to_move:
            moves = game.legal_moves(position)
            if not moves:
                return Variation(game.evaluate(game.out_of_moves(position), player), ())
        else:
            moves = [SKIP]

        opponent = game.get_opponent(player)
        best: Optional[Variation] = None

        for move in moves:
            child_depth = depth if move == SKIP else depth - 1
            child = self._negamax(
                game.apply_move(position, move), child_depth, opponent, -beta, -alpha
            )
            if child is None:
                return None

            score = -child.value
            if best is None or score > best.value:
                best = Variation(score, (move,) + child.pv)

            alpha = max(alpha, score)
            if alpha >= beta:
                break

        if use_tt:
            if best.value <= original_alpha:
                bound = BoundType.UPPER  # All moves failed low
            elif best.value >= beta:
                bound = BoundType.LOWER  # We failed high
            else:
                bound = BoundType.EXACT
            self.tt.store(position, bound, best.value, depth, best.pv)

        return best

    def _elapsed_ms(self) -> int:
        return int(time.time() * 1000 - self.start_time)

    def clear_tt(self):
        """Clear transposition table."""
        self.tt.clear()

    def get_stats(self) -> dict:
        """Get search statistics."""
        return {
            'nodes_searched': self.nodes_searched,
            'tt_stats': self.tt.get_stats(),
        }
