"""The application object that owns the window and renderer, and its launcher."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from rayengine.log import Log
from rayengine.renderer import IRenderer, Renderer
from rayengine.window import Window, WindowSpecification


@dataclass
class ApplicationCommandLineArgs:
    """The raw command-line arguments the application was started with."""

    args: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.args)


@dataclass
class ApplicationSpecification:
    """Settings required to create an application instance."""

    name: str = "RayEngine-Application"
    width: int = 800
    height: int = 600
    vsync: bool = False
    command_line_args: ApplicationCommandLineArgs = field(
        default_factory=ApplicationCommandLineArgs
    )


class Application:
    """Opens a window, sets up a renderer and drives the frame loop."""

    def __init__(self, specification: ApplicationSpecification | None = None) -> None:
        self._spec = specification if specification is not None else ApplicationSpecification()

        Log.initialize()

        self._window: Window | None = Window(
            WindowSpecification(
                title=self._spec.name,
                width=self._spec.width,
                height=self._spec.height,
                vsync=self._spec.vsync,
            )
        )
        if not self._window.initialize():
            Log.core_logger().error("Failed to initialize window")

        self._renderer: IRenderer | None = Renderer()
        if not self._renderer.initialize():
            Log.core_logger().error("Failed to create renderer")

    @property
    def specification(self) -> ApplicationSpecification:
        return self._spec

    @property
    def window(self) -> Window | None:
        return self._window

    @property
    def renderer(self) -> IRenderer | None:
        return self._renderer

    def run(self) -> None:
        """Render frames until the window asks to close."""
        if self._window is None:
            raise RuntimeError("application has been closed")
        while not self._window.should_close():
            self._window.poll_events()
            if self._renderer is not None:
                self._renderer.begin_frame()
                self._renderer.begin_scene()
                self._renderer.end_scene()
                self._renderer.end_frame()

    def close(self) -> None:
        """Shut down the window and renderer; safe to call more than once."""
        if self._window is not None:
            self._window.shutdown()
            self._window = None
        if self._renderer is not None:
            self._renderer.shutdown()
            self._renderer = None

    def __enter__(self) -> Application:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def launch(
    factory: Callable[[ApplicationCommandLineArgs], Application],
    argv: Sequence[str] | None = None,
) -> int:
    """Create the client application through ``factory``, run it and close it."""
    args = ApplicationCommandLineArgs(list(sys.argv if argv is None else argv))
    app = factory(args)
    try:
        app.run()
    finally:
        app.close()
    return 0