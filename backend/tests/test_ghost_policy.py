"""
Tests for the ghost policies, the variant registry and the autopilot.
"""

import random
import pytest
import sys
import os

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import UP, DOWN, LEFT, RIGHT, DIRECTIONS
from domain.game_state import GameState
from domain.grid import to_index, step_index
from players import (
    ChasePolicy,
    WanderPolicy,
    GreedyPelletPlayer,
    GhostPolicy,
    CHASE,
    WANDER,
    get_policy_class,
    build_policy,
    list_variants,
    AVAILABLE_VARIANTS,
)


def no_random_draw():
    raise AssertionError("chasing ghosts must not draw a random direction")


class TestChase:
    """Tests for the chase branch of ChasePolicy."""

    def test_aligned_row_closes_column_gap(self):
        """Ghost at (5,5), player at (5,8): distance 3 is in range, ghost moves to (5,6)."""
        policy = ChasePolicy(random_direction=no_random_draw)
        move = policy.decide(to_index(5, 5), to_index(5, 8))

        assert move.mode == CHASE
        assert move.direction is None
        assert move.position == to_index(5, 6)

    def test_aligned_column_closes_row_gap(self):
        policy = ChasePolicy(random_direction=no_random_draw)
        move = policy.decide(to_index(8, 3), to_index(6, 3))
        assert move.position == to_index(7, 3)

    def test_both_axes_move_in_one_tick(self):
        """Chasing adjusts row and column together, giving a diagonal step."""
        policy = ChasePolicy(random_direction=no_random_draw)
        move = policy.decide(to_index(5, 5), to_index(6, 7))
        assert move.position == to_index(6, 6)

    def test_moving_up_and_left(self):
        policy = ChasePolicy(random_direction=no_random_draw)
        move = policy.decide(to_index(6, 6), to_index(5, 4))
        assert move.position == to_index(5, 5)

    def test_chase_onto_player(self):
        """An adjacent ghost steps onto the player's cell."""
        policy = ChasePolicy(random_direction=no_random_draw)
        move = policy.decide(111, 112)
        assert move.position == 112

    def test_same_cell_stays(self):
        policy = ChasePolicy(random_direction=no_random_draw)
        assert policy.decide(112, 112).position == 112

    def test_chase_never_wraps(self):
        """Chasing across the board goes the long way, not through the edge."""
        policy = ChasePolicy(detection_range=30, random_direction=no_random_draw)
        move = policy.decide(to_index(0, 0), to_index(14, 14))
        assert move.position == to_index(1, 1)

    def test_detection_range_is_configurable(self):
        policy = ChasePolicy(detection_range=1, random_direction=lambda: UP)
        move = policy.decide(to_index(5, 5), to_index(5, 7))
        assert move.mode == WANDER


class TestWander:
    """Tests for the wander branch."""

    def test_out_of_range_wanders(self):
        """Distance 4 is out of range: the ghost takes the drawn wrapped step."""
        policy = ChasePolicy(random_direction=lambda: LEFT)
        move = policy.decide(to_index(5, 5), to_index(5, 9))

        assert move.mode == WANDER
        assert move.direction == LEFT
        assert move.position == to_index(5, 4)

    def test_wander_wraps(self):
        policy = ChasePolicy(random_direction=lambda: UP)
        move = policy.decide(0, 112)
        assert move.position == 210

    def test_wander_lands_on_a_neighbour(self):
        """With a seeded source, every wander step is one of the four wrapped neighbours."""
        policy = ChasePolicy(rng=random.Random(7))
        ghost = to_index(0, 0)
        neighbours = {step_index(ghost, d) for d in DIRECTIONS}

        for _ in range(50):
            move = policy.decide(ghost, 112)
            assert move.mode == WANDER
            assert move.direction in DIRECTIONS
            assert move.position in neighbours

    def test_seeded_draws_are_reproducible(self):
        first = ChasePolicy(rng=random.Random(42))
        second = ChasePolicy(rng=random.Random(42))
        moves_a = [first.decide(0, 112) for _ in range(20)]
        moves_b = [second.decide(0, 112) for _ in range(20)]
        assert moves_a == moves_b

    def test_wander_policy_ignores_player(self):
        """WanderPolicy wanders even when the player is adjacent."""
        policy = WanderPolicy(random_direction=lambda: DOWN)
        move = policy.decide(111, 112)
        assert move.mode == WANDER
        assert move.position == 126


class TestBasePolicy:
    def test_decide_not_implemented(self):
        with pytest.raises(NotImplementedError):
            GhostPolicy().decide(0, 112)


class TestVariantRegistry:
    """Tests for players.variant_registry."""

    def test_default_is_chase(self):
        assert get_policy_class() is ChasePolicy
        assert get_policy_class("") is ChasePolicy
        assert get_policy_class("   ") is ChasePolicy
        assert get_policy_class("default") is ChasePolicy

    def test_wander_variant(self):
        assert get_policy_class(" wander ") is WanderPolicy

    def test_unknown_variant_raises(self):
        with pytest.raises(ValueError, match="No ghost policy registered"):
            get_policy_class("ambush")

    def test_build_policy_passes_detection_range(self):
        policy = build_policy("default", size=15, detection_range=5)
        assert isinstance(policy, ChasePolicy)
        assert policy.detection_range == 5

    def test_build_wander_policy(self):
        policy = build_policy("wander", size=9, detection_range=5)
        assert isinstance(policy, WanderPolicy)
        assert policy.size == 9

    def test_list_variants_matches_registry(self):
        assert [v["key"] for v in list_variants()] == AVAILABLE_VARIANTS


class TestGreedyPelletPlayer:
    """Tests for the autopilot used in headless runs."""

    def test_heads_for_adjacent_pellet(self):
        snapshot = GameState(player_position=112, ghosts=[0], pellets={113}).snapshot()
        player = GreedyPelletPlayer(rng=random.Random(0))
        assert player.get_move(snapshot) == RIGHT

    def test_heads_toward_distant_pellet(self):
        snapshot = GameState(player_position=112, ghosts=[0], pellets={to_index(2, 7)}).snapshot()
        player = GreedyPelletPlayer(rng=random.Random(0))
        assert player.get_move(snapshot) == UP

    def test_avoids_stepping_onto_ghost(self):
        snapshot = GameState(player_position=112, ghosts=[113], pellets={113}).snapshot()
        player = GreedyPelletPlayer(rng=random.Random(0))
        for _ in range(20):
            assert player.get_move(snapshot) in {UP, DOWN, LEFT}

    def test_surrounded_still_returns_a_direction(self):
        ghosts = [step_index(112, d) for d in DIRECTIONS]
        snapshot = GameState(player_position=112, ghosts=ghosts, pellets={0}).snapshot()
        player = GreedyPelletPlayer(rng=random.Random(0))
        assert player.get_move(snapshot) in DIRECTIONS
