"""
Tests for engine.movement - player and ghost move rules.
"""

import random
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT, PLAYING, VICTORY, CAPTURED, DIRECTIONS
from domain.game_state import GameState
from domain.grid import to_index, step_index
from engine.movement import move_player, move_ghosts
from players.base import GhostPolicy, GhostMove, WANDER
from players.chase_policy import ChasePolicy


class FixedTargetPolicy(GhostPolicy):
    """Sends every ghost to the same cell and records the player positions it saw."""

    def __init__(self, target):
        super().__init__()
        self.target = target
        self.seen_player_positions = []

    def decide(self, ghost_pos, player_pos):
        self.seen_player_positions.append(player_pos)
        return GhostMove(WANDER, None, self.target)


class TestMovePlayer:
    """Tests for move_player."""

    def test_eats_pellet_and_scores(self):
        state = GameState.initial()
        new_state = move_player(state, RIGHT)

        assert new_state.player_position == 113
        assert 113 not in new_state.pellets
        assert new_state.score == 10
        assert new_state.status == PLAYING

    def test_input_state_is_not_mutated(self):
        state = GameState.initial()
        move_player(state, RIGHT)

        assert state.player_position == 112
        assert 113 in state.pellets
        assert state.score == 0

    def test_empty_cell_does_not_score(self):
        state = GameState(player_position=112, ghosts=[0], pellets={200}, score=30)
        new_state = move_player(state, LEFT)

        assert new_state.player_position == 111
        assert new_state.score == 30
        assert new_state.pellets == {200}

    def test_custom_reward(self):
        new_state = move_player(GameState.initial(), DOWN, reward=25)
        assert new_state.score == 25

    def test_wraps_around_the_edge(self):
        # (7,14) -> (7,0)
        state = GameState(player_position=to_index(7, 14), ghosts=[0], pellets={to_index(7, 0), 1})
        new_state = move_player(state, RIGHT)

        assert new_state.player_position == to_index(7, 0)
        assert new_state.score == 10

    def test_walking_into_ghost_is_capture(self):
        """The move is rejected and the capture fires immediately."""
        state = GameState(player_position=112, ghosts=[0, 113], pellets={113, 5})
        new_state = move_player(state, RIGHT)

        assert new_state.status == CAPTURED
        assert new_state.player_position == 112
        assert new_state.pellets == {113, 5}
        assert new_state.score == 0

    def test_last_pellet_is_victory(self):
        state = GameState(player_position=112, ghosts=[0], pellets={97}, score=90)
        new_state = move_player(state, UP)

        assert new_state.status == VICTORY
        assert new_state.pellets == set()
        assert new_state.score == 100

    def test_direction_is_preserved(self):
        state = GameState.initial()
        state.current_direction = RIGHT
        assert move_player(state, RIGHT).current_direction == RIGHT


class TestMoveGhosts:
    """Tests for move_ghosts."""

    def test_all_ghosts_see_the_same_player_position(self):
        state = GameState.initial()
        policy = FixedTargetPolicy(target=50)
        move_ghosts(state, policy)
        assert policy.seen_player_positions == [112, 112, 112, 112]

    def test_ghosts_may_share_a_cell(self):
        new_state = move_ghosts(GameState.initial(), FixedTargetPolicy(target=50))
        assert new_state.ghosts == [50, 50, 50, 50]
        assert new_state.status == PLAYING

    def test_ghosts_do_not_eat_pellets(self):
        state = GameState.initial()
        new_state = move_ghosts(state, FixedTargetPolicy(target=50))

        assert 50 in new_state.pellets
        assert new_state.pellets == state.pellets
        assert new_state.score == 0

    def test_ghost_reaching_player_is_capture(self):
        state = GameState(player_position=112, ghosts=[0, 111, 224], pellets={5})
        policy = ChasePolicy(rng=random.Random(3))
        new_state = move_ghosts(state, policy)

        assert new_state.ghosts[1] == 112
        assert new_state.status == CAPTURED

    def test_input_state_is_not_mutated(self):
        state = GameState.initial()
        move_ghosts(state, FixedTargetPolicy(target=50))
        assert state.ghosts == [0, 14, 210, 224]

    def test_order_independent(self):
        """Reversing ghost order reverses the result and nothing else."""
        policy = ChasePolicy(random_direction=lambda: UP)
        ghosts = [to_index(7, 5), to_index(7, 9), to_index(0, 0)]
        forward = move_ghosts(GameState(player_position=112, ghosts=ghosts, pellets={1}), policy)
        backward = move_ghosts(GameState(player_position=112, ghosts=ghosts[::-1], pellets={1}), policy)

        assert forward.ghosts == backward.ghosts[::-1]
        assert forward.ghosts == [to_index(7, 6), to_index(7, 8), to_index(14, 0)]

    def test_same_draws_same_result(self):
        state = GameState.initial()
        first = move_ghosts(state, ChasePolicy(rng=random.Random(11)))
        second = move_ghosts(state, ChasePolicy(rng=random.Random(11)))
        assert first == second

    def test_wander_step_membership(self):
        state = GameState.initial()
        new_state = move_ghosts(state, ChasePolicy(rng=random.Random(5)))
        for old, new in zip(state.ghosts, new_state.ghosts):
            assert new in {step_index(old, d) for d in DIRECTIONS}
