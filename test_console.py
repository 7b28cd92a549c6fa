"""Tests for the console collaborators and the entry point."""

import pytest

from console.move_source import ConsoleMoveSource
from console.renderer import BoardRenderer
from logic.board import Board, Marker
from logic.player import Player
import main


def feed(lines):
    """input() replacement that replays lines and records prompts."""
    remaining = list(lines)
    prompts = []

    def fake_input(prompt=""):
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    fake_input.prompts = prompts
    return fake_input


def test_render_empty_board():
    text = BoardRenderer().render(Board(3))

    assert text.splitlines() == [
        "   0 1 2",
        "0  - - -",
        "1  - - -",
        "2  - - -",
    ]


def test_render_placed_markers():
    board = Board(2)
    board.place(0, 1, Marker("X"))
    board.place(1, 0, Marker("O"))

    assert BoardRenderer().render(board).splitlines() == [
        "   0 1",
        "0  - X",
        "1  O -",
    ]


def test_render_aligns_two_digit_indices():
    lines = BoardRenderer().render(Board(11)).splitlines()

    assert lines[0].startswith("     0  1")
    assert lines[-1].startswith("10   -")
    assert len({len(line) for line in lines}) == 1


def test_move_source_prompts_with_player_label():
    fake_input = feed(["1 2"])
    source = ConsoleMoveSource(input_fn=fake_input, output_fn=lambda _: None)

    move = source(Player(1, "Henry", Marker("X")))

    assert move == (1, 2)
    assert fake_input.prompts == ["Henry (X) - Enter row and column: "]


def test_move_source_reprompts_on_garbage():
    errors = []
    source = ConsoleMoveSource(input_fn=feed(["a b", "1", "-1, 5"]), output_fn=errors.append)

    assert source(Player(1, "Henry", Marker("X"))) == (-1, 5)
    assert len(errors) == 2


def test_move_source_propagates_eof():
    source = ConsoleMoveSource(input_fn=feed([]), output_fn=lambda _: None)

    with pytest.raises(EOFError):
        source(Player(1, "Henry", Marker("X")))


@pytest.mark.parametrize("line, expected", [
    ("0 0", (0, 0)),
    ("  2   1 ", (2, 1)),
    ("3,4", (3, 4)),
    ("", None),
    ("1 2 3", None),
    ("x 1", None),
])
def test_parse(line, expected):
    assert ConsoleMoveSource.parse(line) == expected


def test_ask_board_size():
    assert main.ask_board_size(feed(["4"])) == 4
    assert main.ask_board_size(feed(["four"])) is None


def test_main_plays_a_full_game(monkeypatch, capsys):
    moves = ["0 0", "1 1", "0 1", "2 2", "0 2"]
    monkeypatch.setattr("builtins.input", feed(moves))

    assert main.main(["--size", "3"]) == 0

    out = capsys.readouterr().out
    assert "TIC TAC TOE" in out
    assert "[INFO] Game started." in out
    assert "[INFO] Henry played at (0,0)." in out
    assert "[INFO] John played at (1,1)." in out
    assert "[INFO] Henry has won the game." in out
    assert "Henry wins the match!" in out
    assert out.rstrip().endswith("Goodbye!")


def test_main_asks_for_size(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", feed(["1", "0 0"]))

    assert main.main(["--player1", "Ann"]) == 0

    out = capsys.readouterr().out
    assert "[INFO] Ann has won the game." in out


def test_main_rejects_unknown_variant(capsys):
    assert main.main(["--size", "3", "--variant", "gravity"]) == 1
    assert "Unknown rule variant: gravity" in capsys.readouterr().out


def test_main_rejects_bad_size(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", feed(["zero"]))

    assert main.main([]) == 1
    assert "Board size must be a positive number." in capsys.readouterr().out


def test_main_survives_running_out_of_input(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", feed(["0 0"]))

    assert main.main(["--size", "3"]) == 0
    assert "Game interrupted by user." in capsys.readouterr().out
