"""
Movement rules for the player and the ghosts.

Both operations take a GameState and return a new one; the input state is
never modified.
"""

import logging
from typing import List

from domain.constants import CAPTURED, VICTORY, PELLET_REWARD
from domain.game_state import GameState
from domain.grid import step_index
from players.base import GhostPolicy, GhostMove

logger = logging.getLogger(__name__)


def move_player(state: GameState, direction: str, reward: int = PELLET_REWARD) -> GameState:
    """
    Move the player one wrapped step in `direction`.

    Walking into a ghost rejects the move and captures the player on the
    spot. Otherwise the player moves, eats any pellet on the new cell, and
    the game is won once the last pellet is gone.
    """
    new_state = state.copy()
    candidate = step_index(state.player_position, direction, state.size)

    if candidate in state.ghosts:
        logger.debug(f"Player walked into a ghost at {candidate}")
        new_state.status = CAPTURED
        return new_state

    new_state.player_position = candidate

    if candidate in new_state.pellets:
        new_state.pellets.remove(candidate)
        new_state.score += reward

    if not new_state.pellets:
        new_state.status = VICTORY

    return new_state


def move_ghosts(state: GameState, policy: GhostPolicy) -> GameState:
    """
    Move every ghost once according to `policy`.

    All ghosts decide against the player position at the start of the tick
    and the new positions are committed together, so the result does not
    depend on ghost order. Ghosts may stack on the same cell.
    """
    new_state = state.copy()
    player_position = state.player_position

    moves: List[GhostMove] = [policy.decide(ghost, player_position) for ghost in state.ghosts]
    new_state.ghosts = [move.position for move in moves]

    logger.debug(
        "Ghost moves: " + ", ".join(f"{g}->{m.position} ({m.mode})" for g, m in zip(state.ghosts, moves))
    )

    if player_position in new_state.ghosts:
        new_state.status = CAPTURED

    return new_state
