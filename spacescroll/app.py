import sys

import pygfx as gfx

from .animate import update_step, scroll_step
from .config import SceneConfig
from .loop import FrameLoop
from .scroll import ScrollTracker
from .utils import logger, assert_type
from .world import build_state


class SpaceScrollApp:
    """The scroll-driven space scene in a window.

    This class wires the parts together: a canvas and renderer, the scene
    state, a ``ScrollTracker`` that turns wheel and key events into scroll
    events, and a ``FrameLoop`` that renders a frame on every repaint.

    Parameters
    ----------
    config : SceneConfig
        The scene configuration. Default ``SceneConfig.from_env()``.
    canvas : BaseRenderCanvas
        The canvas to draw to. If both ``renderer`` and ``canvas`` are set,
        then the renderer needs to use the set canvas. If neither is set, a
        canvas is created with ``rendercanvas.auto``.
    renderer : gfx.Renderer
        The renderer to use while drawing the scene.
    stats : bool
        Display performance statistics such as FPS and draw time
        in the corner of the screen. Defaults to False.
    max_frames : int
        Stop animating after this many frames. Default None (run until
        the window is closed).

    """

    def __init__(
        self, config=None, *, canvas=None, renderer=None, stats=False, max_frames=None
    ):
        assert_type("config", config, None, SceneConfig)
        self.config = config or SceneConfig.from_env()

        if renderer is None and canvas is None:
            from rendercanvas.auto import RenderCanvas

            canvas = RenderCanvas(title="spacescroll")
            renderer = gfx.WgpuRenderer(canvas)
        elif renderer is None:
            renderer = gfx.WgpuRenderer(canvas)
        elif canvas is None:
            canvas = renderer.target
        elif canvas is not renderer.target:
            raise ValueError("The renderer's render target differs from the canvas.")
        self.canvas = canvas
        self.renderer = renderer

        self.state = build_state(self.config, renderer)

        self.scroll = ScrollTracker(
            self.config.page_height, line_step=self.config.scroll_step
        )
        self.scroll.add_handler(self._on_scroll)
        self.scroll.register_events(renderer)

        self.stats = gfx.Stats(renderer) if stats else None

        self.loop = FrameLoop(
            self.canvas.request_draw,
            self.draw,
            max_frames=max_frames,
            idle=self.draw_still,
        )

    def _on_scroll(self):
        scroll_step(self.state, self.scroll.distance_from_top)
        if self.loop.stopped:
            # Nothing animates anymore, show the new camera and moon
            self.canvas.request_draw()

    def draw(self):
        """Render one frame."""
        if self.stats is None:
            update_step(self.state)
            return

        # The stats overlay is rendered on top, so the scene must not flush yet
        self.stats.start()
        update_step(self.state, flush=False)
        self.stats.stop()
        self.stats.render()

    def draw_still(self):
        """Render the scene as it is, without animating it."""
        state = self.state
        if self.stats is None:
            state.renderer.render(state.scene, state.camera)
        else:
            state.renderer.render(state.scene, state.camera, flush=False)
            self.stats.render()

    def run(self):
        """Start the frame loop and enter the GUI event loop."""
        if self.canvas.get_closed():
            raise RuntimeError(
                "Can not run on a closed canvas. Did you call `run()` twice?"
            )
        logger.info(
            f"Running spacescroll with {len(self.state.stars)} stars "
            f"on a {self.config.page_height:g} px page."
        )
        self.loop.start()
        sys.modules[self.canvas.__module__].loop.run()
