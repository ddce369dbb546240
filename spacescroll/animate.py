"""
The per-frame update and the per-scroll-event handler.

Both functions take the ``SceneState`` explicitly and mutate it in place.
Neither catches errors: whatever the controller or renderer raises is left
to the host (rendercanvas logs errors raised inside a draw).
"""


def update_step(state, *, flush=True):
    """Apply one frame of animation and render the scene.

    Spins the torus by the fixed per-frame delta, advances the orbit
    controller by one tick, and renders. Motion is per frame, not per
    second, so the perceived speed follows the display refresh rate.
    Pass ``flush=False`` to draw more on top before the frame is shown.
    """
    state.frame_count += 1

    state.torus_spin.advance(state.config.torus_delta)

    controller = state.controller
    if controller is not None:
        cam_state = controller.tick()
        if cam_state:
            state.camera.set_state(cam_state)

    state.renderer.render(state.scene, state.camera, flush=flush)


def scroll_step(state, distance_from_top):
    """Apply one scroll event.

    The moon spins by a fixed delta per event, no matter how far was
    scrolled. The camera height is set (not incremented) from the scroll
    offset, so only the latest offset matters.

    Parameters
    ----------
    state : SceneState
        The scene to update.
    distance_from_top : float
        The signed scroll offset: 0 at the top of the page, negative when
        scrolled down.

    """
    state.scroll_count += 1

    state.moon_spin.advance(state.config.moon_delta)
    state.camera.local.y = distance_from_top * state.config.camera_scroll_scale
