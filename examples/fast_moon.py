"""
Fast Moon
=========

Example showing the scene with a custom configuration: fewer stars, a moon
that spins fast and a camera that moves further per scrolled pixel. It
also shows how to wire the parts by hand instead of using SpaceScrollApp.
"""

from rendercanvas.auto import RenderCanvas, loop
import pygfx as gfx

import spacescroll as ss


config = ss.SceneConfig(
    star_count=50,
    moon_delta=(0.2, 0.3, 0.2),
    camera_scroll_scale=-0.005,
    page_height=3000,
)

canvas = RenderCanvas(size=(1000, 600), title="fast moon")
renderer = gfx.WgpuRenderer(canvas)
state = ss.build_state(config, renderer)

scroll = ss.ScrollTracker(config.page_height, line_step=config.scroll_step)
scroll.add_handler(lambda: ss.scroll_step(state, scroll.distance_from_top))
scroll.register_events(renderer)

frames = ss.FrameLoop(canvas.request_draw, lambda: ss.update_step(state))


if __name__ == "__main__":
    frames.start()
    loop.run()
