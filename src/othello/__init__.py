"""
Othello rules engine with cascade scheduling for flip animations.
"""
from .config import Config, get_default_config
from .game import Board, CaptureReport, CellState, OthelloGame, Tally
from .session import GameSession, result_text

__version__ = "0.1"

__all__ = [
    'Config', 'get_default_config',
    'Board', 'CaptureReport', 'CellState', 'OthelloGame', 'Tally',
    'GameSession', 'result_text',
]
