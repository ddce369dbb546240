import numpy as np
import pylinalg as la
import pygfx as gfx

from .config import SceneConfig
from .utils import assert_type


class Spin:
    """The accumulated Euler rotation of a world object.

    The angles (in rad, XYZ order) grow without bound; they are never wrapped
    to [0, 2pi). After each change the rotation is pushed to the object's
    ``local.rotation`` as a quaternion, which is periodic by nature.

    Parameters
    ----------
    wobject : WorldObject
        The object to rotate.
    angles : tuple of float
        The initial angles. Default (0, 0, 0).

    """

    def __init__(self, wobject, angles=(0, 0, 0)):
        assert_type("wobject", wobject, gfx.WorldObject)
        self._wobject = wobject
        self._angles = np.zeros(3, np.float64)
        self._angles[:] = angles
        self._apply()

    def __repr__(self):
        x, y, z = self.angles
        return f"<Spin of {self._wobject!r} ({x:.3f}, {y:.3f}, {z:.3f})>"

    @property
    def wobject(self):
        """The world object being rotated."""
        return self._wobject

    @property
    def angles(self):
        """The accumulated rotation (x, y, z) in radians."""
        return tuple(float(a) for a in self._angles)

    def advance(self, delta):
        """Add the per-axis ``delta`` to the rotation."""
        self._angles += delta
        self._apply()

    def _apply(self):
        self._wobject.local.rotation = la.quat_from_euler(self._angles, order="XYZ")


class SceneState:
    """The objects shared by the frame update and the scroll handler.

    One instance is created per scene (see ``build_state()``) and passed by
    reference to ``update_step()`` and ``scroll_step()``. Both run on the
    GUI thread, so no locking is involved: whichever writes the camera last
    before a render wins.
    """

    def __init__(
        self,
        *,
        scene,
        camera,
        torus,
        moon,
        stars=(),
        controller=None,
        renderer=None,
        config=None,
    ):
        assert_type("scene", scene, gfx.Scene)
        assert_type("camera", camera, gfx.PerspectiveCamera)
        assert_type("torus", torus, gfx.WorldObject)
        assert_type("moon", moon, gfx.WorldObject)
        assert_type("controller", controller, None, gfx.Controller)
        assert_type("config", config, None, SceneConfig)

        self.scene = scene
        self.camera = camera
        self.torus = torus
        self.moon = moon
        self.stars = tuple(stars)
        self.controller = controller
        self.renderer = renderer
        self.config = config or SceneConfig()

        self.torus_spin = Spin(torus)
        self.moon_spin = Spin(moon)

        self.frame_count = 0
        self.scroll_count = 0
