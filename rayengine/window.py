"""A resizable display window with frame pacing."""

from __future__ import annotations

from dataclasses import dataclass, replace

import pygame

from rayengine.log import Log

VSYNC_FPS = 60


@dataclass
class WindowSpecification:
    """Settings used to open a window."""

    title: str
    width: int
    height: int
    vsync: bool = False


def _display_ready() -> bool:
    return pygame.display.get_init() and pygame.display.get_surface() is not None


class Window:
    """The engine's single display window."""

    def __init__(self, specification: WindowSpecification) -> None:
        self._spec = replace(specification)
        self._target_fps = 0
        self._clock = pygame.time.Clock()
        self._close_requested = False

    @property
    def specification(self) -> WindowSpecification:
        return self._spec

    @property
    def title(self) -> str:
        return self._spec.title

    @property
    def width(self) -> int:
        return self._spec.width

    @property
    def height(self) -> int:
        return self._spec.height

    @property
    def vsync(self) -> bool:
        return self._spec.vsync

    @property
    def target_fps(self) -> int:
        """Frame-rate cap applied by ``poll_events``; 0 means uncapped."""
        return self._target_fps

    @property
    def native_window(self) -> pygame.Surface | None:
        return pygame.display.get_surface() if pygame.display.get_init() else None

    def initialize(self) -> bool:
        """Open the window; logs and returns False when it cannot be made ready."""
        try:
            pygame.display.init()
            pygame.display.set_mode((self._spec.width, self._spec.height), pygame.RESIZABLE)
            pygame.display.set_caption(self._spec.title)
        except pygame.error as exc:
            Log.core_logger().critical("Window is not ready: %s", exc)
            return False

        self.set_vsync(self._spec.vsync)
        self._close_requested = False

        if not _display_ready():
            Log.core_logger().critical("Window is not ready")
            return False

        self._target_fps = VSYNC_FPS
        Log.core_logger().trace("Window Initialized")
        return True

    def shutdown(self) -> None:
        if _display_ready():
            pygame.display.quit()

    def set_vsync(self, enabled: bool) -> None:
        self._spec.vsync = enabled
        self._target_fps = VSYNC_FPS if enabled else 0

    def set_title(self, title: str) -> None:
        self._spec.title = title
        if pygame.display.get_init():
            pygame.display.set_caption(title)

    def should_close(self) -> bool:
        """True once closing was requested, or when no window is open."""
        if not _display_ready():
            return True
        return self._close_requested

    def poll_events(self) -> None:
        """Process pending input events and wait out the frame-rate cap."""
        if not _display_ready():
            return
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._close_requested = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self._close_requested = True
        self._clock.tick(self._target_fps)