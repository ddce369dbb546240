import time

from .utils import logger


class Clock:
    """A simple clock for keeping track of time"""

    def __init__(self):
        self._start_time = None
        self._last_time = None
        self._running = False

    @property
    def running(self):
        return self._running

    def start(self):
        self._start_time = self._last_time = time.perf_counter()
        self._running = True

    def stop(self):
        if self._running:
            self._last_time = time.perf_counter()
        self._running = False

    def get_elapsed_time(self):
        """Seconds since ``start()``, frozen once stopped."""
        if self._start_time is None:
            return 0.0
        if self._running:
            self._last_time = time.perf_counter()
        return self._last_time - self._start_time


class FrameLoop:
    """Drive a step function once per display refresh.

    The loop relies on a host primitive that calls a function before the
    next repaint, such as ``canvas.request_draw`` of a rendercanvas canvas.
    Every frame first requests the next frame and only then runs the step,
    so an error raised by the step ends that frame, not the loop.

    Parameters
    ----------
    request_frame : Callable
        Called with a callback; the host must call it once before its next
        repaint.
    step : Callable
        The zero-argument function to run every frame.
    max_frames : int, optional
        If given, the loop stops by itself after this many frames. Default
        None, i.e. run until ``stop()`` is called or the host goes away.
    idle : Callable, optional
        The zero-argument function to run when the host repaints after the
        loop stopped, e.g. to render the scene without animating it. The
        host keeps calling the last requested callback on a resize or
        expose, so without it these repaints draw nothing.

    """

    def __init__(self, request_frame, step, *, max_frames=None, idle=None):
        if not callable(request_frame):
            raise TypeError("FrameLoop request_frame must be callable.")
        if not callable(step):
            raise TypeError("FrameLoop step must be callable.")
        if idle is not None and not callable(idle):
            raise TypeError("FrameLoop idle must be callable.")
        if max_frames is not None:
            max_frames = int(max_frames)
            if max_frames < 0:
                raise ValueError("FrameLoop max_frames must not be negative.")

        self._request_frame = request_frame
        self._step = step
        self._idle = idle
        self._max_frames = max_frames

        self._clock = Clock()
        self._started = False
        self._frame_count = 0

    @property
    def running(self):
        """Whether frames are being scheduled."""
        return self._clock.running

    @property
    def stopped(self):
        """Whether the loop was started and has stopped since."""
        return self._started and not self._clock.running

    @property
    def frame_count(self):
        """The number of frames for which the step was started."""
        return self._frame_count

    @property
    def max_frames(self):
        return self._max_frames

    @property
    def elapsed(self):
        """The time in seconds since the loop was started."""
        return self._clock.get_elapsed_time()

    def start(self):
        """Schedule the first frame."""
        if self._started:
            raise RuntimeError("A FrameLoop can only be started once.")
        self._started = True
        self._clock.start()
        logger.info("Frame loop started.")
        if self._max_frames == 0:
            self.stop()
        if self._clock.running or self._idle is not None:
            self._request_frame(self._frame)

    def stop(self):
        """Stop the loop. A frame that is already requested, and every later
        repaint, runs the idle function instead of the step.
        """
        if self._clock.running:
            self._clock.stop()
            logger.info(
                f"Frame loop stopped after {self._frame_count} frames "
                f"({self.elapsed:.1f} s)."
            )

    def _frame(self):
        if not self._clock.running:
            if self._idle is not None:
                self._idle()
            return

        self._frame_count += 1
        last = self._max_frames is not None and self._frame_count >= self._max_frames
        if last:
            self.stop()
        else:
            self._request_frame(self._frame)

        self._step()
