"""
Tests for the command-line entry point.
"""

import logging
import os
import signal
import sys
import threading
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from mancala_search.cli import format_line, main
from mancala_search.game.position import SKIP

OPENING = ['0', '4', '4', '4', '4', '4', '4', '0', '4', '4', '4', '4', '4', '4']


class TestSearchOutput:
    """Successful runs."""

    def test_opening(self, capsys):
        assert main(['0'] + OPENING + ['--max-depth', '3']) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "P0 [0 4 4 4 4 4 4 0 4 4 4 4 4 4] = ..."
        assert lines[1] == "depth 0: val=0 pv=[]"
        assert [line.split(':')[0] for line in lines[1:5]] == ['depth 0', 'depth 1', 'depth 2', 'depth 3']
        assert lines[5].startswith("best line [")
        assert " move " in lines[5] and " -> P" in lines[5]
        # One line per move available after the chosen one
        assert len(lines) > 6
        assert all(line.startswith("  P") for line in lines[6:])
        assert "interrupted" not in lines

    def test_pasted_board(self, capsys):
        args = ['1', '[0'] + OPENING[1:-1] + ['4]', '--max-depth', '1']
        assert main(args) == 0
        assert capsys.readouterr().out.startswith("P1 [0 4 4 4 4 4 4 0 4 4 4 4 4 4] = ...")

    def test_board_drawing(self, capsys):
        assert main(['0'] + OPENING + ['--max-depth', '0', '--board']) == 0
        out = capsys.readouterr().out
        assert "player 0 to move" in out
        assert "no move available" in out

    def test_no_legal_moves(self, capsys):
        cells = ['9', '2', '3', '0', '0', '0', '0', '5', '0', '0', '0', '0', '0', '0']
        assert main(['0'] + cells) == 0
        out = capsys.readouterr().out
        assert "depth 1: val=-1 pv=[]" in out
        assert "no move available" in out
        assert "out of moves -> P0 [9 0 0 0 0 0 0 10 0 0 0 0 0 0]" in out

    def test_already_decided(self, capsys):
        cells = ['30'] + ['0'] * 6 + ['2'] + ['1'] * 6
        assert main(['1'] + cells) == 0
        out = capsys.readouterr().out
        assert "depth 0: val=-1000000 pv=[]" in out
        assert "game already decided" in out

    def test_logs_search_stats(self, capsys, caplog):
        caplog.set_level(logging.INFO, logger='mancala_search.cli')
        assert main(['0'] + OPENING + ['--max-depth', '2']) == 0

        messages = [r.getMessage() for r in caplog.records if r.name == 'mancala_search.cli']
        assert any(m.startswith("Searched ") and "'stores'" in m for m in messages)

    def test_time_limit_interrupts(self, capsys):
        assert main(['0'] + OPENING + ['--time-limit-ms', '100']) == 0
        assert "interrupted" in capsys.readouterr().out.splitlines()

    def test_sigint_keeps_best_result(self, capsys):
        previous = signal.getsignal(signal.SIGINT)
        timer = threading.Timer(0.3, os.kill, (os.getpid(), signal.SIGINT))
        timer.start()
        try:
            assert main(['0'] + OPENING + ['--time-limit-ms', '20000']) == 0
        finally:
            timer.cancel()

        lines = capsys.readouterr().out.splitlines()
        assert "interrupted" in lines
        assert any(line.startswith("best line") for line in lines)
        assert signal.getsignal(signal.SIGINT) is previous


class TestBadArguments:
    """Malformed input stops before any search."""

    @pytest.mark.parametrize("args", [
        [],
        ['0'] + OPENING[:-1],
        ['0'] + OPENING + ['4'],
        ['0'] + OPENING[:-1] + ['x'],
        ['0'] + OPENING[:-1] + ['-1'],
        ['0'] + OPENING[:-1] + ['300'],
        ['2'] + OPENING,
        ['0'] + OPENING + ['--max-depth', '-1'],
    ])
    def test_exits_non_zero(self, args, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(args)
        assert excinfo.value.code != 0
        captured = capsys.readouterr()
        assert captured.err
        assert "depth" not in captured.out


def test_format_line():
    assert format_line(()) == "[]"
    assert format_line((13, SKIP, 3)) == "[13 skip 3]"


def test_package_exports():
    import mancala_search
    from mancala_search.engine.alphabeta import AlphaBetaEngine
    from mancala_search.game.mancala import Mancala

    assert mancala_search.AlphaBetaEngine is AlphaBetaEngine
    assert mancala_search.Mancala is Mancala
    result = mancala_search.AlphaBetaEngine(mancala_search.Mancala()).search(
        mancala_search.initial_position(), cancel=mancala_search.CancellationToken(), max_depth=1
    )
    assert isinstance(result, mancala_search.SearchResult)
    assert result.best_move in Mancala().legal_moves(mancala_search.Position(0, [0] + [4] * 6 + [0] + [4] * 6))
