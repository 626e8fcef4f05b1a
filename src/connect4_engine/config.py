"""
Configuration for Connect4 play against the alpha-beta engine.
"""

from dataclasses import dataclass


# Engine Configuration
ENGINE_CONFIG = {
    'thinking_time': 2.0,               # Seconds per computer move
    'zobrist_seed': None,               # None = fresh hash keys every round
    'search_seed': None,                # Seed for the random fallback move
}

# Play Configuration
PLAY_CONFIG = {
    'computer_name': 'BeepBoop',
    'markers': {1: 'X', -1: 'O'},       # X always moves first
    'turn_pause': 2.0,                  # Seconds to show the board after a move
    'result_pause': 2.0,
}


@dataclass
class ThinkingTimeRange:
    minimum: float = 0.1
    maximum: float = 30.0

    def __contains__(self, seconds: float) -> bool:
        return self.minimum <= seconds <= self.maximum

    def __str__(self):
        return f"{self.minimum:g} and {self.maximum:g}"


THINKING_TIME_RANGE = ThinkingTimeRange()
