"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import Feedback, GameState, GameStatus, Guess, LetterStatus, Settings

__all__ = ['Feedback', 'GameState', 'GameStatus', 'Guess', 'LetterStatus', 'Settings']
