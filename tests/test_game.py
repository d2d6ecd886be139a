"""Tests for the firing loop and the status display."""

from unittest import mock

from oneship.board import CellState
from oneship.game import Game, Outcome, TokenReader
from tests.conftest import feed


def make_game(rng, *tokens, output=None, **kwargs):
    write = output.write if output is not None else (lambda *_: None)
    return Game(1, board_size=5, rng=rng, read=feed(*tokens), write=write, **kwargs)


def test_sinking_the_ship_in_four_shots(vertical_rng):
    game = make_game(vertical_rng, 1, 3, 2, 3, 3, 3, 4, 3)
    assert game.play() is Outcome.SUNK
    assert game.ship.is_sunk()
    assert game.shots == 4
    assert game.hits == 4
    assert all(game.board.cell(r, 3) is CellState.HIT for r in range(1, 5))


def test_misses_are_marked_and_counted(vertical_rng):
    game = make_game(vertical_rng, 5, 5, 1, 1, 0)
    assert game.play() is Outcome.ABORTED
    assert game.shots == 2
    assert game.hits == 0
    assert game.board.cell(5, 5) is CellState.MISS
    assert game.board.cell(1, 1) is CellState.MISS


def test_off_board_shot_is_not_charged(vertical_rng, output):
    game = make_game(vertical_rng, 6, 1, 0, output=output)
    assert game.play() is Outcome.ABORTED
    assert game.shots == 0
    assert game.hits == 0
    assert not game.board.grid.any()
    assert "(6, 1) is off the board" in output.text


def test_off_board_column_is_not_charged(vertical_rng, output):
    game = make_game(vertical_rng, 2, 9, 2, 3, 0, output=output)
    game.play()
    assert game.shots == 1
    assert game.hits == 1
    assert "(2, 9) is off the board" in output.text


def test_zero_row_aborts_without_touching_the_ship(vertical_rng):
    game = make_game(vertical_rng, 0, 1)
    assert game.play() is Outcome.ABORTED
    assert game.outcome is Outcome.ABORTED
    assert game.shots == 0
    assert game.ship.hits == 0


def test_negative_column_aborts_after_earlier_shots(vertical_rng):
    game = make_game(vertical_rng, 1, 3, 2, -4)
    assert game.play() is Outcome.ABORTED
    assert game.shots == 1
    assert game.hits == 1
    assert game.ship.hits == 1


def test_abort_wins_over_range_check(vertical_rng, output):
    game = make_game(vertical_rng, 9, 0, output=output)
    assert game.play() is Outcome.ABORTED
    assert "off the board" not in output.text


def test_refiring_still_costs_a_shot(vertical_rng, output):
    game = make_game(vertical_rng, 1, 3, 1, 3, 0, output=output)
    game.play()
    assert game.shots == 2
    assert game.hits == 1
    assert game.ship.hits == 1
    assert "already fired at (1, 3)" in output.text
    # The ship no longer matches the cell, so the second shot reads as a miss
    assert game.board.cell(1, 3) is CellState.MISS


def test_refiring_a_miss(vertical_rng, output):
    game = make_game(vertical_rng, 5, 5, 5, 5, 0, output=output)
    game.play()
    assert game.shots == 2
    assert game.board.cell(5, 5) is CellState.MISS
    assert "already fired at (5, 5)" in output.text


def test_both_coordinates_on_one_line(vertical_rng):
    game = make_game(vertical_rng, "1 3", "2 3", "3   3", "4\t3")
    assert game.play() is Outcome.SUNK
    assert game.shots == 4


def test_malformed_coordinate_aborts(vertical_rng):
    game = make_game(vertical_rng, "three", 3)
    assert game.play() is Outcome.ABORTED
    assert game.shots == 0


def test_end_of_input_aborts(vertical_rng):
    game = make_game(vertical_rng, 1, 3)
    assert game.play() is Outcome.ABORTED
    assert game.shots == 1


def test_abort_reveals_the_ship(vertical_rng, output):
    game = make_game(vertical_rng, 0, output=output)
    game.play()
    last = output[-1]
    assert "Game aborted" in last
    grid_rows = last.splitlines()[2:7]
    assert [row.split(" | ")[2] for row in grid_rows] == ["S", "S", "S", "S", "."]


def test_sunk_message(vertical_rng, output):
    game = make_game(vertical_rng, 1, 3, 2, 3, 3, 3, 4, 3, output=output)
    game.play()
    assert "You sank the ship in 4 shots!" in output[-1]
    assert "Shots: 4  Hits: 4" in output[-1]


def test_render_is_idempotent(vertical_rng):
    game = make_game(vertical_rng)
    game.fire(2, 3)
    game.fire(5, 1)
    first = game.render("Status")
    assert game.render("Status") == first


def test_render_status_line(vertical_rng):
    game = Game(7, board_size=5, rng=vertical_rng, read=feed(), write=lambda *_: None)
    game.fire(1, 3)
    game.fire(1, 1)
    text = game.render("Keep going")
    lines = text.splitlines()
    assert lines[0] == "  1   2   3   4   5"
    assert lines[1] == "1 O | . | X | . | ."
    assert lines[-2] == "Game #7  Shots: 2  Hits: 1"
    assert lines[-1] == "Keep going"


def test_display_state_writes_render(vertical_rng, output):
    game = make_game(vertical_rng, output=output)
    game.display_state("hello")
    assert output == ["\n" + game.render("hello")]


def test_shots_are_sent_to_the_shot_log(vertical_rng):
    shot_log = mock.Mock()
    game = make_game(vertical_rng, 1, 3, 5, 5, 0, shot_log=shot_log)
    game.play()
    assert shot_log.record.call_args_list == [
        mock.call(1, 1, 3, "hit"),
        mock.call(1, 5, 5, "miss"),
    ]
    shot_log.finish.assert_called_once_with(1, "aborted", 2, 1)


def test_token_reader_buffers_extra_tokens():
    reads = []

    def read(prompt):
        reads.append(prompt)
        return "4 5 6"

    reader = TokenReader(read)
    assert [reader.next_int("a"), reader.next_int("b"), reader.next_int("c")] == [4, 5, 6]
    assert reads == ["a"]
    reader.next_int("d")
    assert reads == ["a", "d"]


def test_token_reader_skips_blank_lines():
    reader = TokenReader(feed("", "   ", "7"))
    assert reader.next_int("?") == 7


def test_zero_row_still_reads_the_column(vertical_rng):
    reader = TokenReader(feed(0, 4, "n"))
    game = Game(1, board_size=5, rng=vertical_rng, write=lambda *_: None, reader=reader)
    assert game.play() is Outcome.ABORTED
    assert reader.next_token("?") == "n"


def test_games_can_share_a_reader(vertical_rng):
    reader = TokenReader(feed("5 5 0 0 1 1"))
    first = Game(1, board_size=5, rng=vertical_rng, write=lambda *_: None, reader=reader)
    first.play()
    assert reader.pending == ["1", "1"]
    assert first.shots == 1
