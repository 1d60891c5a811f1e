"""The RayForge editor application."""

from __future__ import annotations

from collections.abc import Sequence

from rayengine.application import (
    Application,
    ApplicationCommandLineArgs,
    ApplicationSpecification,
    launch,
)


class RayForge(Application):
    """The editor application built on the engine."""

    def __init__(self, specification: ApplicationSpecification) -> None:
        super().__init__(specification)


def create_application(args: ApplicationCommandLineArgs) -> RayForge:
    """Build the editor with its default window settings."""
    specification = ApplicationSpecification(
        name="RayForge",
        width=1920,
        height=1080,
        vsync=True,
        command_line_args=args,
    )
    return RayForge(specification)


def main(argv: Sequence[str] | None = None) -> int:
    return launch(create_application, argv)


if __name__ == "__main__":
    raise SystemExit(main())