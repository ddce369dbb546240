"""
A scroll position for windows that have no document to scroll.

The scene was designed to sit behind a long web page: scrolling the page
moves the camera. A desktop canvas has no page, so ``ScrollTracker``
emulates one. It keeps the position of a virtual document of
``page_height`` logical pixels, moves it on wheel and key events, and
notifies its handlers whenever the position changes.
"""

from .utils import logger


class ScrollTracker:
    """Track the scroll position of a virtual document.

    The position is exposed as ``distance_from_top``: the position of the
    top of the document relative to the top of the viewport. It is 0 when
    the page is not scrolled and becomes negative when scrolling down, just
    like ``document.body.getBoundingClientRect().top``.

    Parameters
    ----------
    page_height : float
        The height of the virtual document in logical pixels.
    viewport_height : float
        The height of the visible part, typically the canvas height.
    line_step : float
        The distance to scroll per arrow key press. Default 40.

    """

    def __init__(self, page_height, viewport_height=0, *, line_step=40):
        if page_height < 0:
            raise ValueError("ScrollTracker page_height must not be negative.")
        self._page_height = float(page_height)
        self._viewport_height = max(0.0, float(viewport_height))
        self._line_step = float(line_step)
        self._distance_from_top = 0.0
        self._handlers = []

    def __repr__(self):
        return (
            f"<ScrollTracker {self._distance_from_top:g} "
            f"of {self.max_scroll:g} px at {hex(id(self))}>"
        )

    @property
    def distance_from_top(self):
        """The signed scroll offset: 0 at the top, negative further down."""
        return self._distance_from_top

    @property
    def page_height(self):
        return self._page_height

    @property
    def viewport_height(self):
        return self._viewport_height

    @property
    def max_scroll(self):
        """How far (in px) the document can be scrolled down."""
        return max(0.0, self._page_height - self._viewport_height)

    # %% Moving

    def scroll_to(self, distance_from_top):
        """Set the scroll offset (clamped to the document).

        Returns True if the position changed, in which case all handlers
        have been called.
        """
        new = min(0.0, max(-self.max_scroll, float(distance_from_top)))
        if new == self._distance_from_top:
            return False
        self._distance_from_top = new
        self._notify()
        return True

    def scroll_by(self, dy):
        """Scroll down by ``dy`` pixels (up if negative)."""
        return self.scroll_to(self._distance_from_top - dy)

    def resize(self, viewport_height):
        """Update the viewport height, re-clamping the position.

        A resize that clamps the position counts as a scroll, as in a browser.
        """
        self._viewport_height = max(0.0, float(viewport_height))
        return self.scroll_to(self._distance_from_top)

    # %% Handlers

    def add_handler(self, handler):
        """Register a zero-argument function to call on every scroll."""
        if not callable(handler):
            raise TypeError("ScrollTracker handler must be callable.")
        self._handlers.append(handler)

    def remove_handler(self, handler):
        self._handlers.remove(handler)

    def _notify(self):
        for handler in list(self._handlers):
            handler()

    # %% Events

    def register_events(self, renderer):
        """Feed wheel, key and resize events of the renderer into this tracker."""
        renderer.add_event_handler(self.handle_event, "wheel", "key_down", "resize")
        width, height = renderer.logical_size
        self.resize(height)

    def handle_event(self, event):
        """Handle a pygfx event. Returns whether the position changed."""
        type = event.type
        if type == "wheel":
            return self.scroll_by(event.dy)
        elif type == "key_down":
            key = event.key
            if key == "ArrowDown":
                return self.scroll_by(self._line_step)
            elif key == "ArrowUp":
                return self.scroll_by(-self._line_step)
            elif key == "PageDown" or key == " ":
                return self.scroll_by(self._viewport_height or self._line_step)
            elif key == "PageUp":
                return self.scroll_by(-(self._viewport_height or self._line_step))
            elif key == "Home":
                return self.scroll_to(0)
            elif key == "End":
                return self.scroll_to(-self.max_scroll)
        elif type == "resize":
            logger.debug(f"Scroll viewport resized to {event.height} px.")
            return self.resize(event.height)
        return False
