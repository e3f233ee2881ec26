"""
connect4 - Connect Four rules engine

This package provides the Connect Four game state machine (board, move
validation, win/draw detection, turn management), a Gymnasium environment
adapter, and a command-line interface for playing in a terminal.
"""

# Version number
__version__ = '0.2.0'
