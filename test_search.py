"""
Tests for minimax / alpha-beta search and the AI player.
"""

import pytest

from xo.ai_player import AIPlayer
from xo.board import Board
from xo.cell import Outcome, Owner
from xo.search import MinimaxSearch, OptimalMove, leaf_score, minimax


def depth_of(board):
    return len(board.empty_cells())


def positions_after(plies):
    """Distinct boards reachable in exactly `plies` moves, with the side to move."""
    found = {}

    def walk(board, mover, left):
        if board.evaluate() != Outcome.UNDECIDED:
            return
        if left == 0:
            found[(repr(board), mover)] = (board, mover)
            return
        for index in board.empty_cells():
            child = board.copy()
            child.place(index, mover)
            walk(child, mover.opposite(), left - 1)

    for first in Owner:
        walk(Board(), first, plies)
    return list(found.values())


def test_leaf_scores():
    assert leaf_score(Outcome.COMPUTER_WINS) == 1
    assert leaf_score(Outcome.HUMAN_WINS) == -1
    assert leaf_score(Outcome.UNDECIDED) == 0


def test_depth_zero_is_a_leaf():
    board = Board.from_marks(computer=[1, 2])
    assert minimax(board, 0, Owner.COMPUTER) == OptimalMove(-1, 0)


def test_decided_board_is_a_leaf():
    board = Board.from_marks(computer=[1, 2, 3], human=[4, 5])
    assert minimax(board, depth_of(board), Owner.HUMAN) == OptimalMove(-1, 1)

    board = Board.from_marks(computer=[1, 2], human=[4, 5, 6])
    assert minimax(board, depth_of(board), Owner.COMPUTER) == OptimalMove(-1, -1)


def test_full_board_without_depth_budget_left():
    board = Board.from_marks(computer=[1, 2, 6, 7, 9], human=[3, 4, 5, 8])
    assert minimax(board, 3, Owner.COMPUTER) == OptimalMove(-1, 0)


@pytest.mark.parametrize("prune", [True, False])
def test_takes_immediate_win(prune):
    board = Board.from_marks(computer=[1, 2], human=[4, 5])
    assert minimax(board, depth_of(board), Owner.COMPUTER, prune=prune) == OptimalMove(3, 1)


@pytest.mark.parametrize("prune", [True, False])
def test_blocks_human_threat(prune):
    board = Board.from_marks(computer=[5], human=[1, 2])
    move = minimax(board, depth_of(board), Owner.COMPUTER, prune=prune)
    assert move.position == 3
    assert move.score >= 0


@pytest.mark.parametrize("prune", [True, False])
def test_human_side_takes_win(prune):
    board = Board.from_marks(computer=[4, 5], human=[1, 2])
    assert minimax(board, depth_of(board), Owner.HUMAN, prune=prune) == OptimalMove(3, -1)


@pytest.mark.parametrize("prune", [True, False])
def test_human_side_blocks_computer_threat(prune):
    # Computer threatens 7-8-9, every other reply loses at once
    board = Board.from_marks(computer=[7, 8], human=[2, 4])
    move = minimax(board, depth_of(board), Owner.HUMAN, prune=prune)
    assert move.position == 9
    assert move.score <= 0


def test_ties_break_to_lowest_index():
    # Both 3 and 7 win immediately
    board = Board.from_marks(computer=[1, 2, 4], human=[5, 6, 8])
    assert minimax(board, depth_of(board), Owner.COMPUTER).position == 3


def test_empty_board_is_a_draw():
    move = minimax(Board(), 9, Owner.COMPUTER, prune=True)
    assert move.score == 0
    assert move.position in range(1, 10)


def test_search_does_not_modify_board():
    board = Board.from_marks(computer=[1], human=[5])
    before = board.copy()
    minimax(board, depth_of(board), Owner.COMPUTER)
    assert board == before
    assert board.available == before.available


def test_pruning_agrees_with_plain_minimax():
    plain = MinimaxSearch(prune=False)
    pruned = MinimaxSearch(prune=True)

    for plies in (3, 4, 5):
        for board, mover in positions_after(plies):
            depth = depth_of(board)
            assert pruned.search(board, depth, mover) == plain.search(board, depth, mover), board


def test_pruning_visits_fewer_nodes():
    board = Board.from_marks(computer=[1], human=[5])
    plain = MinimaxSearch(prune=False)
    pruned = MinimaxSearch(prune=True)

    plain_move = plain.search(board, depth_of(board), Owner.COMPUTER)
    pruned_move = pruned.search(board, depth_of(board), Owner.COMPUTER)

    assert plain_move == pruned_move
    assert pruned.nodes_evaluated < plain.nodes_evaluated


def test_node_counter_resets_between_searches():
    searcher = MinimaxSearch()
    board = Board.from_marks(computer=[1, 2], human=[4, 5])
    searcher.search(board, depth_of(board), Owner.COMPUTER)
    first = searcher.nodes_evaluated
    searcher.search(board, depth_of(board), Owner.COMPUTER)
    assert searcher.nodes_evaluated == first


def test_opening_book_replies():
    ai = AIPlayer(use_opening_book=True)

    assert ai.get_best_move(Board()) == OptimalMove(1, 0)
    assert ai.get_best_move(Board.from_marks(human=[1])).position == 5
    assert ai.get_best_move(Board.from_marks(human=[5])).position == 1
    assert ai.get_best_move(Board.from_marks(computer=[1], human=[5])).position == 9

    # Book never searched
    assert ai.moves_evaluated == 0


def test_opening_book_falls_back_to_search():
    ai = AIPlayer(use_opening_book=True)
    board = Board.from_marks(computer=[1], human=[2])
    move = ai.get_best_move(board)
    assert ai.moves_evaluated > 0
    assert move.score == 1  # Computer can force a win here


def test_without_opening_book_every_move_is_searched():
    ai = AIPlayer(use_opening_book=False)
    move = ai.get_best_move(Board.from_marks(human=[5]))
    assert ai.moves_evaluated > 0
    assert move.score == 0


def test_verbose_prints_statistics(capsys):
    ai = AIPlayer(verbose=True)
    ai.get_best_move(Board.from_marks(computer=[1, 2], human=[4, 5]))
    assert "Best move: 3 (score: 1)" in capsys.readouterr().out


@pytest.mark.parametrize("computer_first", [True, False])
def test_ai_never_loses(computer_first):
    ai = AIPlayer()

    def play(board, computer_to_move):
        outcome = board.evaluate()
        if outcome != Outcome.UNDECIDED or board.is_full():
            assert outcome != Outcome.HUMAN_WINS, board
            return
        if computer_to_move:
            child = board.copy()
            child.place(ai.get_best_move(board).position, Owner.COMPUTER)
            play(child, False)
        else:
            for index in board.empty_cells():
                child = board.copy()
                child.place(index, Owner.HUMAN)
                play(child, True)

    play(Board(), computer_first)
