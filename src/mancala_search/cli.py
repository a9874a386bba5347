#!/usr/bin/env python3
"""
Search a mancala position from the command line.

Usage:
    mancala-search PLAYER C0 C1 ... C13 [--max-depth N] [--time-limit-ms MS]

Cells are listed in board order (store of player 0 first, store of player 1
at index 7). Press Ctrl-C to stop the search and print the best move of the
deepest completed depth.
"""

import argparse
import logging
import signal
import sys

from mancala_search.config_mancala import BOARD_CONFIG, CLI_CONFIG, SEARCH_CONFIG
from mancala_search.engine.alphabeta import AlphaBetaEngine
from mancala_search.engine.cancellation import CancellationToken
from mancala_search.game.mancala import Mancala
from mancala_search.game.position import Position, SKIP

logger = logging.getLogger(__name__)


def parse_count(text):
    """Integer argument; surrounding brackets and commas are ignored so printed boards can be pasted."""
    try:
        return int(text.strip('[], '))
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")


def format_line(moves):
    return '[' + ' '.join('skip' if m == SKIP else str(m) for m in moves) + ']'


def build_parser(cell_count):
    parser = argparse.ArgumentParser(
        prog='mancala-search',
        description='Alpha-beta search for the best mancala move.',
    )
    parser.add_argument('player', type=parse_count, choices=(0, 1), help='Player to move (0 or 1)')
    parser.add_argument('cells', type=parse_count, nargs='*', metavar='COUNT',
                        help=f'{cell_count} cell counts in board order')
    parser.add_argument('--max-depth', type=int, default=SEARCH_CONFIG['max_depth'],
                        help='Deepest iterative deepening iteration')
    parser.add_argument('--time-limit-ms', type=int, default=SEARCH_CONFIG['time_limit_ms'],
                        help='Stop searching after this many milliseconds (0 = no limit)')
    parser.add_argument('--board', action='store_true', help='Draw the board before searching')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging to stderr')
    return parser


def main(argv=None):
    game = Mancala(BOARD_CONFIG['pits_per_side'])
    parser = build_parser(game.cell_count)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else CLI_CONFIG['log_level'],
        format=CLI_CONFIG['log_format'],
    )

    if len(args.cells) != game.cell_count:
        parser.error(f"expected {game.cell_count} cell counts, got {len(args.cells)}")
    if args.max_depth < 0:
        parser.error("--max-depth must be non-negative")
    try:
        position = Position(args.player, args.cells)
    except ValueError as e:
        parser.error(str(e))

    if args.board:
        print(position.render())
    print(f"{position} = ...")

    engine = AlphaBetaEngine(game, max_depth=args.max_depth)
    cancel = CancellationToken(args.time_limit_ms)

    def report(iteration):
        print(f"depth {iteration.depth}: val={iteration.value} pv={format_line(iteration.pv)}", flush=True)

    def interrupt(signum, frame):
        logger.info("Interrupt received, finishing with the last completed depth")
        cancel.cancel()

    previous_handler = signal.signal(signal.SIGINT, interrupt)
    try:
        result = engine.search(position, cancel=cancel, on_iteration=report)
    finally:
        signal.signal(signal.SIGINT, previous_handler)

    stats = engine.get_stats()
    logger.info(
        "Searched %d nodes in %d ms, tt: %s", stats['nodes_searched'], result.time_ms, stats['tt_stats']
    )
    if result.cancelled:
        print("interrupted")

    if result.best_move is None:
        print("no move available")
        if game.terminal_value(position) != 0:
            print("game already decided")
        elif not game.legal_moves(position):
            print(f"out of moves -> {game.out_of_moves(position)}")
        return 0

    after = game.apply_move(position, result.best_move)
    print(f"best line {format_line(result.principal_variation)} move {result.best_move} -> {after}")
    for move in game.legal_moves(after):
        print(f"  {game.apply_move(after, move)}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
