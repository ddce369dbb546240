"""
The tunable constants of the scene.

All values default to those of the classic three.js "scroll animation"
tutorial scene: a torus of radius 10, 200 stars, a moon that spins on
every scroll event and a camera that moves down as the page scrolls.
"""

import os

from .utils import logger


_DEFAULTS = {
    # Camera
    "fov": 75.0,
    "near": 0.1,
    "far": 1000.0,
    "camera_z": 30.0,
    # Torus
    "torus_radius": 10.0,
    "torus_tube": 3.0,
    "torus_radial_segments": 16,
    "torus_tubular_segments": 100,
    "torus_color": "#ababab",
    "torus_delta": (0.01, 0.01, 0.01),
    # Moon
    "moon_radius": 3.0,
    "moon_position": (2.0, 0.0, 0.0),
    "moon_delta": (0.05, 0.075, 0.05),
    # Scroll
    "camera_scroll_scale": -0.0002,
    "page_height": 5000,
    "scroll_step": 40,
    # Stars
    "star_count": 200,
    "star_spread": 200.0,
    "star_radius": 0.25,
    # Lights and helpers
    "point_light_position": (10.0, 10.0, 10.0),
    "light_intensity": 15.0,
    "grid_size": 200.0,
    "grid_divisions": 50,
    # Assets and randomness
    "assets_dir": None,
    "seed": None,
}

# Fields that hold an xyz triple
_VECTOR_FIELDS = {"torus_delta", "moon_position", "moon_delta", "point_light_position"}

# Fields without a typed default, parsed from the environment like this
_OPTIONAL_FIELDS = {"assets_dir": str, "seed": int}


class SceneConfig:
    """The configuration of a spacescroll scene.

    Each keyword argument overrides the default of the field with the same
    name; see ``SceneConfig.fields()`` for the available names. Vector fields
    (e.g. ``torus_delta``) take three numbers.
    """

    def __init__(self, **kwargs):
        for name in kwargs:
            if name not in _DEFAULTS:
                raise TypeError(f"SceneConfig got an unexpected field '{name}'")
        for name, default in _DEFAULTS.items():
            setattr(self, name, kwargs.get(name, default))

    def __setattr__(self, name, value):
        if name not in _DEFAULTS:
            raise AttributeError(f"SceneConfig has no field '{name}'")
        if name in _VECTOR_FIELDS:
            value = _as_vec3(name, value)
        super().__setattr__(name, value)

    def __repr__(self):
        changed = [
            f"{name}={getattr(self, name)!r}"
            for name, default in _DEFAULTS.items()
            if getattr(self, name) != (
                _as_vec3(name, default) if name in _VECTOR_FIELDS else default
            )
        ]
        return f"<SceneConfig {' '.join(changed)}>" if changed else "<SceneConfig>"

    @staticmethod
    def fields():
        """A tuple with the names of all fields."""
        return tuple(_DEFAULTS)

    @classmethod
    def from_env(cls, **overrides):
        """Create a config, taking scalar fields from ``SPACESCROLL_<FIELD>``
        environment variables. Explicit keyword overrides win.
        """
        kwargs = {}
        for name, default in _DEFAULTS.items():
            if name in _VECTOR_FIELDS:
                continue
            raw = os.getenv("SPACESCROLL_" + name.upper())
            if raw is None or raw == "":
                continue
            convert = _OPTIONAL_FIELDS.get(name, type(default))
            try:
                kwargs[name] = convert(raw)
            except ValueError:
                logger.warning(
                    f"Ignoring invalid value for SPACESCROLL_{name.upper()}: {raw!r}"
                )
        kwargs.update(overrides)
        return cls(**kwargs)


def _as_vec3(name, value):
    try:
        vec = tuple(float(v) for v in value)
    except (TypeError, ValueError):
        raise ValueError(
            f"SceneConfig.{name} must be three numbers, not {value!r}"
        ) from None
    if len(vec) != 3:
        raise ValueError(f"SceneConfig.{name} must be three numbers, not {value!r}")
    return vec
