"""
Game engine: movement rules and the controller that drives them.
"""

from .movement import move_player, move_ghosts
from .controller import GameController

__all__ = ['move_player', 'move_ghosts', 'GameController']
