"""
Registry for ghost policy variants.

Maps variant keys (e.g., 'default', 'wander') to policy classes. To add a
variant, create a GhostPolicy subclass and add an entry to
POLICY_VARIANT_LOADERS and list_variants().
"""

from typing import Callable, Dict, Type, Optional
from .base import GhostPolicy


def _get_chase_policy() -> Type[GhostPolicy]:
    from .chase_policy import ChasePolicy
    return ChasePolicy


def _get_wander_policy() -> Type[GhostPolicy]:
    from .wander_policy import WanderPolicy
    return WanderPolicy


# Registry: maps variant key -> callable that returns the policy class
POLICY_VARIANT_LOADERS: Dict[str, Callable[[], Type[GhostPolicy]]] = {
    "default": _get_chase_policy,
    "wander": _get_wander_policy,
}

# Canonical list of available variant keys (for API exposure)
AVAILABLE_VARIANTS = list(POLICY_VARIANT_LOADERS.keys())


def get_policy_class(variant_key: Optional[str] = None) -> Type[GhostPolicy]:
    """
    Resolve a ghost policy key to its class.

    Blank or missing keys select the chasing policy that ships as "default".
    Keys are matched after trimming surrounding whitespace.
    """
    key = (variant_key or "").strip() or "default"

    loader = POLICY_VARIANT_LOADERS.get(key)
    if loader is None:
        raise ValueError(
            f"No ghost policy registered under '{key}' (choose from: {', '.join(AVAILABLE_VARIANTS)})"
        )
    return loader()


def list_variants() -> list:
    """
    Return metadata about all available ghost policy variants.
    """
    return [
        {"key": "default", "description": "Chase within detection range, wander otherwise"},
        {"key": "wander", "description": "Always wander, never chase"},
    ]


def build_policy(
    variant_key: Optional[str],
    size: int,
    detection_range: int,
    rng=None,
) -> GhostPolicy:
    """
    Instantiate a registered policy for a given grid.
    """
    policy_class = get_policy_class(variant_key)
    kwargs = {"size": size, "rng": rng}
    if getattr(policy_class, "uses_detection_range", False):
        kwargs["detection_range"] = detection_range
    return policy_class(**kwargs)
