import pygame
import pytest

from rayengine.log import Log
from rayengine.window import Window, WindowSpecification


@pytest.fixture
def log_path(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    path = tmp_path / "window.log"
    Log.initialize(path)
    yield path
    pygame.display.quit()


@pytest.fixture
def window(log_path):
    win = Window(WindowSpecification("Demo", 320, 240))
    assert win.initialize() is True
    return win


def test_not_initialized_should_close(log_path):
    win = Window(WindowSpecification("Idle", 100, 100))
    assert win.should_close() is True
    assert win.native_window is None


def test_initialize_opens_surface_of_requested_size(window):
    assert window.native_window.get_size() == (320, 240)
    assert (window.width, window.height) == (320, 240)
    assert window.should_close() is False


def test_initialize_logs_trace(window, log_path):
    text = log_path.read_text(encoding="utf-8")
    assert "[trace] RAYENGINE: Window Initialized" in text


def test_target_fps_after_initialize_regardless_of_vsync(window):
    assert window.vsync is False
    assert window.target_fps == 60


def test_set_vsync_changes_cap(window):
    window.set_vsync(False)
    assert (window.vsync, window.target_fps) == (False, 0)
    window.set_vsync(True)
    assert (window.vsync, window.target_fps) == (True, 60)


def test_set_title_updates_caption(window):
    window.set_title("Renamed")
    assert window.title == "Renamed"
    assert pygame.display.get_caption()[0] == "Renamed"


def test_initial_caption(window):
    assert pygame.display.get_caption()[0] == window.title


def test_quit_event_requests_close(window):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    window.poll_events()
    assert window.should_close() is True


def test_escape_requests_close(window):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE, mod=0, unicode=""))
    window.poll_events()
    assert window.should_close() is True


def test_other_key_keeps_window_open(window):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a, mod=0, unicode="a"))
    window.poll_events()
    assert window.should_close() is False


def test_shutdown_closes_display(window):
    window.shutdown()
    assert pygame.display.get_init() is False
    assert window.should_close() is True


def test_specification_is_copied(log_path):
    spec = WindowSpecification("Copy", 50, 60, vsync=True)
    win = Window(spec)
    win.set_title("Changed")
    assert spec.title == "Copy"
    assert win.specification.vsync is True