[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rayengine"
version = "0.1.0"
description = "A small 3D application framework with a window, a software renderer and logging, plus the RayForge editor shell"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game engine", "3d", "renderer", "editor", "pygame"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rayforge = "rayengine.forge:main"

[tool.hatch.build.targets.wheel]
packages = ["rayengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
