import pytest

from zen_gomoku.core.models import CellPosition, GameStatus, MoveOutcome, Player
from zen_gomoku.core.session import GameSession
from tests.conftest import ScriptedOracle, draw_move_order


def state_of(session):
    return (session.board, session.status, session.current_player, session.last_move)


class TestApplyMove:
    def test_first_move_is_black(self, human_session):
        assert human_session.apply_move(7, 7) == MoveOutcome.PLACED
        assert human_session.cell(7, 7) == Player.BLACK
        assert human_session.current_player == Player.WHITE
        assert human_session.last_move == CellPosition(7, 7)
        assert human_session.status == GameStatus.PLAYING

    def test_turns_alternate(self, human_session):
        moves = draw_move_order()[:40]
        for count, (row, col) in enumerate(moves, start=1):
            assert human_session.apply_move(row, col) == MoveOutcome.PLACED
            expected = Player.BLACK if count % 2 == 0 else Player.WHITE
            assert human_session.current_player == expected

    def test_occupied_cell_is_rejected(self, human_session):
        human_session.apply_move(7, 7)
        before = state_of(human_session)

        assert human_session.apply_move(7, 7) == MoveOutcome.REJECTED
        assert state_of(human_session) == before

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (15, 0), (0, 15), (99, 99)])
    def test_out_of_range_is_rejected(self, human_session, row, col):
        before = state_of(human_session)
        assert human_session.apply_move(row, col) == MoveOutcome.REJECTED
        assert state_of(human_session) == before

    def test_black_wins_horizontal_five(self, human_session):
        # Black on row 7, white answers on row 0
        for i, col in enumerate(range(7, 11)):
            human_session.apply_move(7, col)
            human_session.apply_move(0, i)

        assert human_session.apply_move(7, 11) == MoveOutcome.WON
        assert human_session.status == GameStatus.BLACK_WON
        # Turn does not pass on the final move
        assert human_session.current_player == Player.BLACK
        assert human_session.last_move == CellPosition(7, 11)

    def test_white_wins_vertical_five(self, human_session):
        black_moves = [(0, 0), (0, 2), (0, 4), (0, 6), (0, 8)]
        for i in range(5):
            human_session.apply_move(*black_moves[i])
            outcome = human_session.apply_move(3 + i, 10)
        assert outcome == MoveOutcome.WON
        assert human_session.status == GameStatus.WHITE_WON

    def test_no_moves_after_game_over(self, human_session):
        for i, col in enumerate(range(7, 11)):
            human_session.apply_move(7, col)
            human_session.apply_move(0, i)
        human_session.apply_move(7, 11)
        before = state_of(human_session)

        for row, col in [(1, 1), (14, 14), (7, 12), (7, 7), (-1, 3)]:
            assert human_session.apply_move(row, col) == MoveOutcome.REJECTED
        assert state_of(human_session) == before

    def test_full_board_without_five_is_a_draw(self, human_session):
        moves = draw_move_order()
        assert len(moves) == 225

        for row, col in moves[:-1]:
            assert human_session.apply_move(row, col) == MoveOutcome.PLACED

        assert human_session.apply_move(*moves[-1]) == MoveOutcome.DRAW
        assert human_session.status == GameStatus.DRAW
        assert human_session.apply_move(0, 0) == MoveOutcome.REJECTED

    def test_board_property_is_a_copy(self, human_session):
        board = human_session.board
        board[0][0] = Player.WHITE
        assert human_session.cell(0, 0) == Player.EMPTY


class TestReset:
    def test_reset_restores_initial_state(self, human_session):
        for row, col in draw_move_order()[:17]:
            human_session.apply_move(row, col)

        human_session.reset()

        assert all(cell == Player.EMPTY for row in human_session.board for cell in row)
        assert human_session.status == GameStatus.PLAYING
        assert human_session.current_player == Player.BLACK
        assert human_session.last_move is None
        assert not human_session.is_oracle_thinking
        assert human_session.oracle_rationale == ""

    def test_reset_after_win_allows_play(self, human_session):
        for i, col in enumerate(range(7, 11)):
            human_session.apply_move(7, col)
            human_session.apply_move(0, i)
        human_session.apply_move(7, 11)

        generation = human_session.generation
        human_session.reset()

        assert human_session.generation == generation + 1
        assert human_session.apply_move(7, 11) == MoveOutcome.PLACED


class TestHumanInput:
    def test_human_input_rejected_on_oracle_turn(self):
        session = GameSession(oracle=ScriptedOracle([]), oracle_player=Player.WHITE)
        # No event loop here, so the oracle turn is not scheduled
        assert session.submit_move(7, 7) == MoveOutcome.PLACED
        assert session.is_oracle_turn()

        before = state_of(session)
        assert session.submit_move(8, 8) == MoveOutcome.REJECTED
        assert state_of(session) == before

    def test_human_input_accepted_without_ai(self):
        session = GameSession(oracle=ScriptedOracle([]), ai_mode=False)
        assert session.submit_move(7, 7) == MoveOutcome.PLACED
        assert session.submit_move(8, 8) == MoveOutcome.PLACED

    def test_ai_mode_needs_an_oracle(self, human_session):
        assert not human_session.ai_mode
        with pytest.raises(ValueError):
            human_session.set_ai_mode(True)

    def test_empty_is_not_a_valid_oracle_colour(self):
        with pytest.raises(ValueError):
            GameSession(oracle_player=Player.EMPTY)


class TestSnapshot:
    def test_snapshot_reflects_state(self):
        session = GameSession(oracle=ScriptedOracle([]), oracle_player=Player.WHITE)
        session.submit_move(7, 7)
        snapshot = session.snapshot()

        assert snapshot.board[7][7] == Player.BLACK
        assert snapshot.board_size == 15
        assert snapshot.current_player == Player.WHITE
        assert snapshot.status == GameStatus.PLAYING
        assert snapshot.last_move == CellPosition(7, 7)
        assert snapshot.ai_mode
        assert not snapshot.accepts_human_input
        assert snapshot.winning_line == ()

    def test_snapshot_is_detached(self, human_session):
        snapshot = human_session.snapshot()
        human_session.apply_move(0, 0)
        assert snapshot.board[0][0] == Player.EMPTY

    def test_snapshot_winning_line(self, human_session):
        for i, col in enumerate(range(7, 11)):
            human_session.apply_move(7, col)
            human_session.apply_move(0, i)
        human_session.apply_move(7, 11)

        snapshot = human_session.snapshot()
        assert snapshot.winning_line == tuple((7, c) for c in range(7, 12))
        assert not snapshot.accepts_human_input
