"""
Unit tests for players, game orchestration and the command line.
"""

import itertools
import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from connect4_engine.game.bitboard import BitBoard
from connect4_engine.players import ComputerPlayer, HumanPlayer
from connect4_engine.play import Game, build_parser, main


class TestHumanPlayer:
    """Test move validation and prompting."""

    def test_move_choice_error(self):
        board = BitBoard(seed=0)
        for _ in range(6):
            board.make_move(0, 1 if board.empty_squares() % 2 == 0 else -1)

        assert HumanPlayer.move_choice_error(board, 0) == "Sorry, that number's out of range"
        assert HumanPlayer.move_choice_error(board, 8) == "Sorry, that number's out of range"
        assert HumanPlayer.move_choice_error(board, None) == "Sorry, that number's out of range"
        assert HumanPlayer.move_choice_error(board, 1) == "Sorry, that column's full!"
        assert HumanPlayer.move_choice_error(board, 4) is None

    def test_reprompts_until_legal(self):
        answers = iter(['9', 'abc', '', '4'])
        output = []
        human = HumanPlayer('Ada', player=1, input_fn=lambda prompt: next(answers), output_fn=output.append)
        board = BitBoard(seed=0)

        column = human.make_move(board)

        assert column == 3
        assert board.cell(3, 0) == 1
        assert output.count("Sorry, that number's out of range") == 3
        assert output[-1] == "Ada places in column 4"


class TestComputerPlayer:
    """Test the engine-backed player."""

    def test_plays_legal_move(self):
        output = []
        computer = ComputerPlayer('BeepBoop', player=-1, thinking_time=0.1, seed=0, output_fn=output.append)
        board = BitBoard(seed=0)
        board.make_move(3, 1)

        column = computer.make_move(board)

        assert 0 <= column < 7
        assert board.empty_squares() == 40
        assert bin(board.positions[-1]).count('1') == 1
        assert computer.last_result.best_move == column
        assert output[-1] == f"BeepBoop places in column {column + 1}"
        assert output[-2].startswith("After looking")

    def test_takes_the_win(self):
        computer = ComputerPlayer('BeepBoop', player=-1, thinking_time=0.2, seed=0, output_fn=lambda line: None)
        board = BitBoard(seed=0)
        for column, player in [(0, 1), (4, -1), (0, 1), (4, -1), (1, 1), (4, -1), (6, 1)]:
            board.make_move(column, player)

        computer.make_move(board)

        assert board.four_connected(-1)


def scripted_input(marker='x', rounds=1):
    """Answers prompts: marker, thinking time, then cycles through columns."""
    columns = itertools.cycle(str(col) for col in range(1, 8))
    remaining = [rounds]

    def answer(prompt):
        if 'marker' in prompt:
            return marker
        if 'thinking time' in prompt:
            return '0.1'
        if 'another round' in prompt:
            remaining[0] -= 1
            return 'y' if remaining[0] > 0 else 'n'
        if 'name' in prompt:
            return 'Ada'
        return next(columns)

    return answer


class TestGame:
    """Test round orchestration."""

    def test_full_round(self):
        output = []
        game = Game(input_fn=scripted_input(), output_fn=output.append, sleep_fn=lambda seconds: None, seed=0)

        result = game.round()

        assert result in ('winner', 'tie')
        assert game.human.name == 'Ada'
        assert game.human.player == 1
        assert game.computer.player == -1
        assert game.computer.thinking_time == 0.1
        assert sum(game.scoreboard.values()) == (1 if result == 'winner' else 0)

    def test_marker_choice_decides_first_player(self):
        game = Game(name='Ada', marker='o', thinking_time=0.1,
                    input_fn=scripted_input(), output_fn=lambda line: None, sleep_fn=lambda seconds: None)
        game.board = BitBoard(seed=0)
        game.set_marker_preference()

        assert game.human.player == -1
        assert game.current_player is game.computer

    def test_rejects_out_of_range_thinking_time(self):
        answers = iter(['100', 'fast', '2.5'])
        output = []
        game = Game(name='Ada', input_fn=lambda prompt: next(answers), output_fn=output.append,
                    sleep_fn=lambda seconds: None)

        game.set_difficulty_preference()

        assert game.computer.thinking_time == 2.5
        assert output.count("Sorry, you must enter a number between 0.1 and 30") == 2

    def test_detect_game_result(self):
        game = Game(name='Ada', marker='x', thinking_time=0.1,
                    input_fn=scripted_input(), output_fn=lambda line: None, sleep_fn=lambda seconds: None)
        game.board = BitBoard(seed=0)
        game.set_marker_preference()
        assert game.detect_game_result() is None

        for col in range(4):
            game.board.make_move(col, 1)
        assert game.detect_game_result() == 'winner'

        game.update_scoreboard('winner')
        assert game.scoreboard == {'Ada': 1, 'BeepBoop': 0}

    def test_play_loops_until_declined(self):
        output = []
        game = Game(name='Ada', marker='x', thinking_time=0.05, seed=0,
                    input_fn=scripted_input(rounds=2), output_fn=output.append, sleep_fn=lambda seconds: None)

        game.play()

        assert output[-1] == "Thanks for playing!"
        assert sum(1 for line in output if line.strip() == "SCOREBOARD") == 2


class TestCommandLine:
    """Test argument parsing."""

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.name is None
        assert args.marker is None
        assert args.thinking_time is None
        assert not args.verbose

    def test_parser_options(self):
        args = build_parser().parse_args(['--name', 'Ada', '--marker', 'o', '--thinking-time', '1.5', '--seed', '3'])
        assert args.marker == 'O'
        assert args.thinking_time == 1.5
        assert args.seed == 3

    def test_rejects_thinking_time_out_of_range(self):
        with pytest.raises(SystemExit):
            main(['--thinking-time', '45'])

    def test_rejects_unknown_marker(self):
        with pytest.raises(SystemExit):
            main(['--marker', 'z'])
