"""
Human and computer players.

Both kinds expose `make_move(board)`, which chooses a column and applies it
to the board for the player's marker.
"""

from typing import Callable, Optional

from connect4_engine.config import ENGINE_CONFIG, PLAY_CONFIG
from connect4_engine.engine.alphabeta import AlphaBetaEngine
from connect4_engine.game.bitboard import BitBoard, NUM_COLS


class Player:
    def __init__(self, name: str, player: int = 1):
        self.name = name
        self.player = player

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r}, player={self.player})"

    @property
    def marker(self) -> str:
        return PLAY_CONFIG['markers'][self.player]

    def make_move(self, board: BitBoard) -> int:
        raise NotImplementedError


class HumanPlayer(Player):
    """Reads 1-based column numbers until a legal one is entered."""

    def __init__(
        self,
        name: str,
        player: int = 1,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print
    ):
        super().__init__(name, player)
        self.input_fn = input_fn
        self.output_fn = output_fn

    @staticmethod
    def move_choice_error(board: BitBoard, column: Optional[int]) -> Optional[str]:
        """
        Validate a 1-based column choice.

        Returns:
            Error message, or None if the column can be played
        """
        if column is None or not 1 <= column <= NUM_COLS:
            return "Sorry, that number's out of range"
        if not board.is_open(column - 1):
            return "Sorry, that column's full!"
        return None

    def make_move(self, board: BitBoard) -> int:
        while True:
            answer = self.input_fn(f"Please select a column (Enter a number 1-{NUM_COLS}) ")
            try:
                column = int(answer.strip())
            except ValueError:
                column = None

            error = self.move_choice_error(board, column)
            if error:
                self.output_fn(error)
                continue

            self.output_fn(f"{self.name} places in column {column}")
            board.make_move(column - 1, self.player)
            return column - 1


class ComputerPlayer(Player):
    """Plays the move chosen by the alpha-beta engine within its thinking time."""

    def __init__(
        self,
        name: str,
        player: int = -1,
        thinking_time: float = ENGINE_CONFIG['thinking_time'],
        seed: Optional[int] = ENGINE_CONFIG['search_seed'],
        output_fn: Callable[[str], None] = print
    ):
        super().__init__(name, player)
        self.thinking_time = thinking_time
        self.seed = seed
        self.output_fn = output_fn
        self.last_result = None

    def make_move(self, board: BitBoard) -> int:
        self.output_fn(f"{self.name}'s thinking...")
        engine = AlphaBetaEngine(board, self.player, self.thinking_time, seed=self.seed)
        result = engine.search()
        self.last_result = result

        board.make_move(result.best_move, self.player)
        self.output_fn(
            f"After looking {result.depth_reached} moves ahead "
            f"and considering {result.nodes_searched:,} positions,"
        )
        self.output_fn(f"{self.name} places in column {result.best_move + 1}")
        return result.best_move
