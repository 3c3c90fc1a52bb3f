"""Banana Stand voice skill."""

BANANA_STAND_VERSION = "1.0.0"

__all__ = ["BANANA_STAND_VERSION"]
