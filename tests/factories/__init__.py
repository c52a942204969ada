"""Factory configuration and exports.

This module exports all factories for convenient importing in tests.
"""

from tests.factories.auth import TokenPayloadFactory
from tests.factories.recipe import build_recipe, recipe_payload


__all__ = [
    "TokenPayloadFactory",
    "build_recipe",
    "recipe_payload",
]
