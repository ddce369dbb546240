"""A scroll-driven space scene, rendered with pygfx."""

# ruff: noqa: F401

from ._version import __version__, version_info
from . import utils

from .config import SceneConfig
from .geometries import torus_geometry
from .state import Spin, SceneState
from .animate import update_step, scroll_step
from .scroll import ScrollTracker
from .loop import Clock, FrameLoop
from .world import build_state, load_texture, create_stars
from .app import SpaceScrollApp
from .utils import logger
