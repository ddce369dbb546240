"""
One-time construction of the scene: torus, lights, helpers, stars, background
and moon. The objects are created once and live as long as the scene.
"""

import os

import numpy as np
import imageio.v3 as iio
import pygfx as gfx

from .config import SceneConfig
from .geometries import torus_geometry
from .state import SceneState
from .utils import logger, assert_type, get_assets_dir


SPACE_IMAGE = "space.jpg"
MOON_IMAGE = "moon.jpg"
MOON_NORMAL_IMAGE = "normal.jpg"


def load_texture(path, *, colorspace="srgb"):
    """Load an image from disk as a 2D texture.

    Returns None (and logs a warning) if the file does not exist, so that the
    scene can still be shown without its images. Other errors, like an
    unreadable image, propagate.
    """
    path = str(path)
    if not os.path.isfile(path):
        logger.warning(f"Texture image not found: {path}")
        return None

    im = np.asarray(iio.imread(path))
    if im.ndim == 2:
        im = np.stack([im, im, im], axis=2)
    if im.shape[2] == 3:
        # There are no rgb texture formats, pad with an opaque alpha channel
        alpha = np.full(im.shape[:2] + (1,), np.iinfo(im.dtype).max, im.dtype)
        im = np.concatenate([im, alpha], 2)

    logger.info(f"Loaded texture {os.path.basename(path)} {im.shape[1]}x{im.shape[0]}")
    return gfx.Texture(im, dim=2, colorspace=colorspace)


def create_torus(config):
    geometry = torus_geometry(
        config.torus_radius,
        config.torus_tube,
        config.torus_radial_segments,
        config.torus_tubular_segments,
    )
    material = gfx.MeshStandardMaterial(color=config.torus_color)
    return gfx.Mesh(geometry, material)


def create_lights(config):
    """Create a white point light (with a helper sphere) and an ambient light."""
    point_light = gfx.PointLight("#ffffff", config.light_intensity)
    point_light.local.position = config.point_light_position
    point_light.add(gfx.PointLightHelper(1))

    ambient_light = gfx.AmbientLight("#404040", config.light_intensity)
    return point_light, ambient_light


def create_stars(config):
    """Create small white spheres scattered uniformly in a cube around the origin.

    The stars share one geometry and material. Their positions are drawn
    with ``numpy.random.default_rng(config.seed)``.
    """
    count = int(config.star_count)
    if count < 0:
        raise ValueError("The number of stars must not be negative.")

    geometry = gfx.sphere_geometry(config.star_radius, 24, 24)
    material = gfx.MeshStandardMaterial(color="#ffffff")

    half = config.star_spread / 2
    rng = np.random.default_rng(config.seed)
    positions = rng.uniform(-half, half, size=(count, 3))

    stars = []
    for pos in positions:
        star = gfx.Mesh(geometry, material)
        star.local.position = pos
        stars.append(star)
    return stars


def create_background(assets_dir):
    texture = load_texture(os.path.join(assets_dir, SPACE_IMAGE))
    if texture is None:
        return gfx.Background.from_color("#000000")
    return gfx.Background(None, gfx.BackgroundImageMaterial(map=texture))


def create_moon(config, assets_dir):
    """Create the textured moon, positioned once from ``config.moon_position``."""
    texture = load_texture(os.path.join(assets_dir, MOON_IMAGE))
    normal_map = load_texture(
        os.path.join(assets_dir, MOON_NORMAL_IMAGE), colorspace="physical"
    )

    if texture is None:
        material = gfx.MeshStandardMaterial(color="#888888")
    else:
        material = gfx.MeshStandardMaterial(map=texture)
    if normal_map is not None:
        material.normal_map = normal_map

    moon = gfx.Mesh(gfx.sphere_geometry(config.moon_radius, 32, 32), material)
    moon.local.position = config.moon_position
    return moon


def create_controller(camera, renderer=None):
    """Create the orbit controller for the camera.

    The controller does not update the camera by itself: ``update_step()``
    ticks it once per frame. Its wheel binding is dropped, because the wheel
    scrolls the (virtual) page.
    """
    controller = gfx.OrbitController(
        camera, target=(0, 0, 0), auto_update=False, register_events=renderer
    )
    for key in list(controller.controls):
        if key.endswith("wheel"):
            del controller.controls[key]
    return controller


def build_state(config=None, renderer=None, canvas_size=None):
    """Build the complete scene and return its ``SceneState``.

    Parameters
    ----------
    config : SceneConfig, optional
        The scene configuration. Default ``SceneConfig()``.
    renderer : Renderer, optional
        The renderer to draw with. If given, the orbit controller listens to
        its pointer events and the camera aspect follows its logical size.
    canvas_size : tuple, optional
        The (width, height) used for the camera aspect when there is no
        renderer. Default (640, 480).

    """
    assert_type("config", config, None, SceneConfig)
    config = config or SceneConfig()
    assets_dir = get_assets_dir(config.assets_dir)

    if canvas_size is None:
        canvas_size = renderer.logical_size if renderer is not None else (640, 480)
    width, height = canvas_size
    aspect = width / height if height else 1

    scene = gfx.Scene()

    camera = gfx.PerspectiveCamera(
        config.fov, aspect, depth_range=(config.near, config.far)
    )
    camera.local.z = config.camera_z

    torus = create_torus(config)
    scene.add(torus)

    point_light, ambient_light = create_lights(config)
    grid = gfx.GridHelper(config.grid_size, int(config.grid_divisions))
    scene.add(point_light, ambient_light, grid)

    stars = create_stars(config)
    if stars:
        scene.add(*stars)

    scene.add(create_background(assets_dir))

    moon = create_moon(config, assets_dir)
    scene.add(moon)

    scene.add(camera)
    controller = create_controller(camera, renderer)

    logger.info(
        f"Scene built with {len(stars)} stars, images from {assets_dir}, "
        f"camera at z={config.camera_z:g}."
    )

    return SceneState(
        scene=scene,
        camera=camera,
        torus=torus,
        moon=moon,
        stars=stars,
        controller=controller,
        renderer=renderer,
        config=config,
    )
