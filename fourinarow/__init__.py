"""
fourinarow - Rules engine for the Four in a Row (Connect Four) game

This package provides the board mechanics, win and draw detection, and a
game engine that owns the move history and turn order. A Gymnasium
environment is included for driving games programmatically.
"""

# Version number
__version__ = '0.1.0'
