#!/usr/bin/env python3
"""
Play Connect Four against the alpha-beta engine in the terminal.
X always moves first; the computer thinks for a configurable number of seconds.
"""

import argparse
import logging
import sys
import time
from typing import Callable, Dict, List, Optional

from connect4_engine.config import ENGINE_CONFIG, PLAY_CONFIG, THINKING_TIME_RANGE
from connect4_engine.game.bitboard import BitBoard
from connect4_engine.game.render import render_board
from connect4_engine.players import ComputerPlayer, HumanPlayer, Player


class Game:
    """
    Rounds of human vs computer with a running scoreboard.

    Options left as None are asked for interactively at the start of each round.
    """

    def __init__(
        self,
        name: Optional[str] = None,
        marker: Optional[str] = None,
        thinking_time: Optional[float] = None,
        seed: Optional[int] = ENGINE_CONFIG['zobrist_seed'],
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        sleep_fn: Callable[[float], None] = time.sleep
    ):
        self.input_fn = input_fn
        self.output_fn = output_fn
        self.sleep_fn = sleep_fn
        self.marker = marker.upper() if marker else None
        self.thinking_time = thinking_time
        self.seed = seed

        self.output_fn("Welcome to Connect 4!\n")
        self.human = HumanPlayer(name or self.retrieve_player_name(), input_fn=input_fn, output_fn=output_fn)
        self.computer = ComputerPlayer(
            PLAY_CONFIG['computer_name'], seed=seed, output_fn=output_fn
        )
        self.scoreboard: Dict[str, int] = {self.human.name: 0, self.computer.name: 0}
        self.board: Optional[BitBoard] = None
        self.current_player: Optional[Player] = None

    # ------------------------------------------------------------------
    # Prompts
    # ------------------------------------------------------------------

    def _ask(self, prompt: str, accept: Callable[[str], bool], retry: str) -> str:
        while True:
            answer = self.input_fn(prompt + " ").strip()
            if accept(answer):
                return answer
            self.output_fn(retry)

    def retrieve_player_name(self) -> str:
        return self._ask(
            "Please enter your name",
            lambda answer: bool(answer),
            "Sorry, you must enter something for your name"
        )

    def set_marker_preference(self):
        markers = PLAY_CONFIG['markers']
        options = " or ".join(f"'{marker.lower()}'" for marker in markers.values())

        marker = self.marker
        if marker is None:
            marker = self._ask(
                f"Type either {options} to choose your marker ('x' goes first)",
                lambda answer: answer.upper() in markers.values(),
                f"Sorry, you must choose either {options}"
            ).upper()

        self.human.player = next(player for player, symbol in markers.items() if symbol == marker)
        self.computer.player = -self.human.player
        self.current_player = self.human if self.human.player == 1 else self.computer

    def set_difficulty_preference(self):
        thinking_time = self.thinking_time
        if thinking_time is None:
            self.output_fn("(more thinking time yields a logarithmic increase in difficulty)")
            thinking_time = float(self._ask(
                f"Type a number between {THINKING_TIME_RANGE} to set the computer thinking time (in seconds)",
                lambda answer: _parse_seconds(answer) in THINKING_TIME_RANGE,
                f"Sorry, you must enter a number between {THINKING_TIME_RANGE}"
            ))
        self.computer.thinking_time = thinking_time

    def player_continues(self) -> bool:
        answer = self._ask(
            "Would you like to play another round? ('y' or 'n')",
            lambda answer: answer[:1].lower() in ('y', 'n') and bool(answer),
            "Please answer 'y' or 'n'"
        )
        return answer[0].lower() == 'y'

    # ------------------------------------------------------------------
    # Rounds
    # ------------------------------------------------------------------

    def play(self):
        while True:
            self.round()
            self.display_scoreboard()
            if not self.player_continues():
                break
        self.output_fn("Thanks for playing!")

    def round(self) -> Optional[str]:
        self.board = BitBoard(seed=self.seed)
        self.set_marker_preference()
        self.set_difficulty_preference()
        self.output_fn("Great! Let's get started...")

        while True:
            self.turn()
            result = self.detect_game_result()
            if result:
                break
            self.switch_turns()

        self.display_result(result)
        self.update_scoreboard(result)
        return result

    def turn(self):
        self.output_fn(render_board(self.board, PLAY_CONFIG['markers']))
        self.current_player.make_move(self.board)
        self.sleep_fn(PLAY_CONFIG['turn_pause'])

    def switch_turns(self):
        self.current_player = self.computer if self.current_player is self.human else self.human

    def detect_game_result(self) -> Optional[str]:
        if self.board.four_connected(self.current_player.player):
            return 'winner'
        if self.board.full():
            return 'tie'
        return None

    def display_result(self, result: str):
        self.output_fn(render_board(self.board, PLAY_CONFIG['markers']))
        if result == 'winner':
            self.output_fn(f"{self.current_player.name} wins the game!")
        else:
            self.output_fn("It's a tie!")

    def update_scoreboard(self, result: str):
        if result == 'winner':
            self.scoreboard[self.current_player.name] += 1

    def display_scoreboard(self):
        line = " | ".join(f"{name} => {score}" for name, score in self.scoreboard.items())
        self.output_fn("SCOREBOARD".center(len(line)))
        self.output_fn("-" * len(line))
        self.output_fn(line + "\n")
        self.sleep_fn(PLAY_CONFIG['result_pause'])


def _parse_seconds(answer: str) -> float:
    try:
        return float(answer)
    except ValueError:
        return -1.0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Connect Four against the alpha-beta engine")
    parser.add_argument('--name', help="Your name (asked for if omitted)")
    parser.add_argument('--marker', type=str.upper, choices=list(PLAY_CONFIG['markers'].values()),
                        help="Your marker, X moves first")
    parser.add_argument('--thinking-time', type=float,
                        help=f"Computer thinking time in seconds, between {THINKING_TIME_RANGE}")
    parser.add_argument('--seed', type=int, default=ENGINE_CONFIG['zobrist_seed'],
                        help="Seed for hash keys and fallback moves")
    parser.add_argument('--verbose', action='store_true', help="Log search progress")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.thinking_time is not None and args.thinking_time not in THINKING_TIME_RANGE:
        parser.error(f"--thinking-time must be between {THINKING_TIME_RANGE}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    try:
        Game(
            name=args.name,
            marker=args.marker,
            thinking_time=args.thinking_time,
            seed=args.seed
        ).play()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted. Thanks for playing!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
