# rayengine

A small framework for 3D applications built on pygame. It opens a resizable
window, runs a frame loop, and draws a scene with a software renderer through
a perspective camera. Logging goes both to the console and to a log file.

The package also ships **RayForge**, an application built on the framework.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running RayForge

```
rayforge
```

This opens a 1920×1080 resizable window titled "RayForge" with vsync on (the
frame rate is capped at 60) and draws a red cube with black edges, seen from
a camera at (10, 10, 10) looking at the origin. Close the window or press
Escape to quit. A log file `RayEngine.log` is written to the current
directory.

## Building your own application

An application is described by an `ApplicationSpecification` (`name`,
`width`, `height`, `vsync` and `command_line_args`). Subclass `Application`
to add your own behaviour, and hand a factory to `launch`:

```python
from rayengine.application import (
    Application,
    ApplicationSpecification,
    launch,
)


class MyGame(Application):
    pass


def create(args):
    return MyGame(ApplicationSpecification(name="My Game", width=1280, height=720, vsync=True))


if __name__ == "__main__":
    launch(create)
```

`launch(factory, argv=None)` wraps `argv` (or `sys.argv`) in an
`ApplicationCommandLineArgs`, calls the factory, runs the frame loop until
the window asks to close, then releases the window and renderer and returns
0. An `Application` can also be used as a context manager; `close()` is safe
to call more than once.

## Pieces

- `rayengine.log.Log` sets up two loggers, `RAYENGINE` (`Log.core_logger()`)
  and `APP` (`Log.client_logger()`). Both log at every level, including an
  extra `trace` level, to standard output (coloured on a terminal) and to the
  file given to `Log.initialize` (`RayEngine.log` by default), which is
  truncated on each call. Asking for a logger before `initialize` raises
  `RuntimeError`.
- `rayengine.window.Window` opens and closes the display window from a
  `WindowSpecification`, polls events, and sets vsync (`set_vsync`) and the
  title (`set_title`).
- `rayengine.renderer.Renderer` implements the `IRenderer` interface: frame
  begin/end and scene begin/end. `Camera3D` describes the camera;
  `project_point` and `cube_vertices` are the geometry helpers it uses.
- `rayengine.application.Application` ties window and renderer together in
  its `run` loop.
- `rayengine.forge` holds `RayForge`, `create_application` and `main`, the
  entry of the `rayforge` command.

## What it does not do

RayForge is a shell: it has no editor panels, scene editing, asset loading
or saving. The renderer always draws the same single cube; there is no scene
graph, and input handling is limited to closing the window.