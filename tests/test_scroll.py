from types import SimpleNamespace

import pytest

from spacescroll import ScrollTracker

from .testutils import FakeRenderer


def wheel(dy):
    return SimpleNamespace(type="wheel", dx=0, dy=dy)


def key(name):
    return SimpleNamespace(type="key_down", key=name, modifiers=())


def test_starts_at_top():
    tracker = ScrollTracker(5000, 1000)
    assert tracker.distance_from_top == 0
    assert tracker.max_scroll == 4000


def test_scroll_by_moves_down_as_negative():
    tracker = ScrollTracker(5000, 1000)

    assert tracker.scroll_by(100)
    assert tracker.distance_from_top == -100
    assert tracker.scroll_by(150)
    assert tracker.distance_from_top == -250
    assert tracker.scroll_by(-50)
    assert tracker.distance_from_top == -200


def test_scroll_is_clamped_to_the_page():
    tracker = ScrollTracker(5000, 1000)

    tracker.scroll_by(-100)
    assert tracker.distance_from_top == 0

    tracker.scroll_by(10_000)
    assert tracker.distance_from_top == -4000

    tracker.scroll_to(123)
    assert tracker.distance_from_top == 0


def test_page_smaller_than_viewport_does_not_scroll():
    tracker = ScrollTracker(500, 1000)
    assert tracker.max_scroll == 0
    assert not tracker.scroll_by(100)
    assert tracker.distance_from_top == 0


def test_handlers_called_once_per_change():
    tracker = ScrollTracker(5000, 1000)
    calls = []
    tracker.add_handler(lambda: calls.append(tracker.distance_from_top))

    tracker.scroll_by(100)
    tracker.scroll_by(100)
    tracker.scroll_to(-200)  # no change
    tracker.scroll_by(-10_000)
    tracker.scroll_by(-10)  # at the top already

    assert calls == [-100, -200, 0]


def test_handlers_called_in_order():
    tracker = ScrollTracker(5000, 1000)
    calls = []
    handler1 = lambda: calls.append(1)  # noqa: E731
    handler2 = lambda: calls.append(2)  # noqa: E731
    tracker.add_handler(handler1)
    tracker.add_handler(handler2)

    tracker.scroll_by(10)
    tracker.remove_handler(handler1)
    tracker.scroll_by(10)

    assert calls == [1, 2, 2]


def test_handler_must_be_callable():
    tracker = ScrollTracker(5000)
    with pytest.raises(TypeError):
        tracker.add_handler("not a function")


def test_negative_page_height():
    with pytest.raises(ValueError):
        ScrollTracker(-1)


def test_resize_reclamps():
    tracker = ScrollTracker(5000, 1000)
    calls = []
    tracker.add_handler(lambda: calls.append(tracker.distance_from_top))

    tracker.scroll_to(-4000)
    assert not tracker.resize(800)  # more room, position is still valid
    assert tracker.distance_from_top == -4000

    assert tracker.resize(2000)
    assert tracker.distance_from_top == -3000
    assert calls == [-4000, -3000]


def test_wheel_events():
    tracker = ScrollTracker(5000, 1000)

    assert tracker.handle_event(wheel(120))
    assert tracker.handle_event(wheel(120))
    assert tracker.distance_from_top == -240
    assert tracker.handle_event(wheel(-240))
    assert tracker.distance_from_top == 0
    assert not tracker.handle_event(wheel(-240))


def test_key_events():
    tracker = ScrollTracker(5000, 1000, line_step=40)

    tracker.handle_event(key("ArrowDown"))
    assert tracker.distance_from_top == -40
    tracker.handle_event(key("PageDown"))
    assert tracker.distance_from_top == -1040
    tracker.handle_event(key("ArrowUp"))
    assert tracker.distance_from_top == -1000
    tracker.handle_event(key("End"))
    assert tracker.distance_from_top == -4000
    tracker.handle_event(key("PageUp"))
    assert tracker.distance_from_top == -3000
    tracker.handle_event(key("Home"))
    assert tracker.distance_from_top == 0

    assert not tracker.handle_event(key("a"))


def test_resize_event():
    tracker = ScrollTracker(5000, 1000)
    tracker.scroll_to(-4000)

    event = SimpleNamespace(type="resize", width=800, height=1500, pixel_ratio=1)
    assert tracker.handle_event(event)
    assert tracker.distance_from_top == -3500


def test_unrelated_events_are_ignored():
    tracker = ScrollTracker(5000, 1000)
    event = SimpleNamespace(type="pointer_move", x=10, y=10)
    assert not tracker.handle_event(event)


def test_register_events():
    renderer = FakeRenderer(logical_size=(640, 480))
    tracker = ScrollTracker(5000)

    tracker.register_events(renderer)

    assert tracker.viewport_height == 480
    [(handler, types)] = renderer.handlers
    assert set(types) == {"wheel", "key_down", "resize"}
    handler(wheel(100))
    assert tracker.distance_from_top == -100
