import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from unittest import mock

import pygame
import pytest

from rayengine.application import Application, ApplicationCommandLineArgs
from rayengine.forge import RayForge, create_application, main


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    pygame.display.quit()


def test_create_application_uses_editor_settings():
    args = ApplicationCommandLineArgs(["rayforge", "--scene", "demo"])
    app = create_application(args)
    try:
        assert isinstance(app, RayForge)
        assert isinstance(app, Application)
        spec = app.specification
        assert spec.name == "RayForge"
        assert (spec.width, spec.height) == (1920, 1080)
        assert spec.vsync is True
        assert spec.command_line_args is args
    finally:
        app.close()


def test_editor_window_matches_specification():
    app = create_application(ApplicationCommandLineArgs(["rayforge"]))
    try:
        assert app.window.title == "RayForge"
        assert app.window.vsync is True
        assert app.window.target_fps == 60
        assert pygame.display.get_surface().get_size() == (1920, 1080)
    finally:
        app.close()


def test_main_runs_until_quit_and_returns_zero(workdir):
    quit_event = pygame.event.Event(pygame.QUIT)
    with mock.patch("pygame.event.get", return_value=[quit_event]):
        assert main(["rayforge"]) == 0
    assert pygame.display.get_init() is False
    assert (workdir / "RayEngine.log").exists()