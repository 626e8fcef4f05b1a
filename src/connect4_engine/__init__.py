"""
Bitboard Connect4 with a time-bounded alpha-beta engine.
"""

__version__ = '0.1.0'
