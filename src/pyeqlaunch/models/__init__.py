"""Data models for launch tokens."""

from pyeqlaunch.models.claims import EqClaims, VariantFlags

__all__ = [
    "EqClaims",
    "VariantFlags",
]
