"""
Geometry generators for the scene's shapes that pygfx does not ship.
"""

# ruff: noqa: F401

from ._torus import torus_geometry
