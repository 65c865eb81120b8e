"""
Ghost policies and automated players for Pellet Chase.

This module contains the ghost decision policies and the autopilot used
to drive the player in headless simulations.
"""

from .base import GhostPolicy, GhostMove, CHASE, WANDER
from .wander_policy import WanderPolicy
from .chase_policy import ChasePolicy
from .autopilot import GreedyPelletPlayer
from .variant_registry import get_policy_class, build_policy, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'GhostPolicy',
    'GhostMove',
    'CHASE',
    'WANDER',
    'WanderPolicy',
    'ChasePolicy',
    'GreedyPelletPlayer',
    'get_policy_class',
    'build_policy',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
