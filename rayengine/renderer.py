"""Renderer interface and a software 3D renderer drawing to the display."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from itertools import product

import pygame

from rayengine.log import Log

Vec3 = tuple[float, float, float]

BACKGROUND_COLOR = (0, 0, 0)
CUBE_COLOR = (230, 41, 55)
WIRE_COLOR = (0, 0, 0)
NEAR_PLANE = 0.01


class IRenderer(ABC):
    """Operations every renderer provides."""

    @abstractmethod
    def initialize(self) -> bool: ...

    @abstractmethod
    def shutdown(self) -> None: ...

    @abstractmethod
    def begin_frame(self) -> None: ...

    @abstractmethod
    def end_frame(self) -> None: ...

    @abstractmethod
    def begin_scene(self) -> None: ...

    @abstractmethod
    def end_scene(self) -> None: ...


class Projection(Enum):
    PERSPECTIVE = 0
    ORTHOGRAPHIC = 1


@dataclass
class Camera3D:
    """A camera looking from ``position`` at ``target``; ``fovy`` is in degrees."""

    position: Vec3 = (0.0, 0.0, 0.0)
    target: Vec3 = (0.0, 0.0, 0.0)
    up: Vec3 = (0.0, 0.0, 0.0)
    fovy: float = 0.0
    projection: Projection = Projection.PERSPECTIVE


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(v: Vec3) -> Vec3:
    length = math.sqrt(_dot(v, v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return (v[0] / length, v[1] / length, v[2] / length)


def _camera_basis(camera: Camera3D) -> tuple[Vec3, Vec3, Vec3]:
    forward = _normalize(_sub(camera.target, camera.position))
    right = _normalize(_cross(forward, camera.up))
    up = _cross(right, forward)
    return right, up, forward


def project_point(camera: Camera3D, point: Vec3, width: int, height: int) -> tuple[float, float] | None:
    """Screen position of a world point, or None if it lies behind the near plane."""
    right, up, forward = _camera_basis(camera)
    rel = _sub(point, camera.position)
    x, y, z = _dot(rel, right), _dot(rel, up), _dot(rel, forward)
    if z < NEAR_PLANE:
        return None
    aspect = width / height
    if camera.projection is Projection.ORTHOGRAPHIC:
        top = camera.fovy / 2.0
        ndc_x, ndc_y = x / (top * aspect), y / top
    else:
        focal = 1.0 / math.tan(math.radians(camera.fovy) / 2.0)
        ndc_x, ndc_y = x * focal / (aspect * z), y * focal / z
    return ((ndc_x + 1.0) * 0.5 * width, (1.0 - ndc_y) * 0.5 * height)


def _corner_index(signs: tuple[int, int, int]) -> int:
    return (signs[0] > 0) << 2 | (signs[1] > 0) << 1 | (signs[2] > 0)


def cube_vertices(center: Vec3, width: float, height: float, length: float) -> list[Vec3]:
    """The eight corners of an axis-aligned box, minimum corner first."""
    half = (width / 2.0, height / 2.0, length / 2.0)
    return [
        (center[0] + sx * half[0], center[1] + sy * half[1], center[2] + sz * half[2])
        for sx, sy, sz in product((-1, 1), repeat=3)
    ]


def _build_faces() -> list[tuple[int, int, tuple[int, ...]]]:
    faces = []
    for axis in range(3):
        others = [a for a in range(3) if a != axis]
        for sign in (-1, 1):
            corners = []
            for pb, pc in ((-1, -1), (-1, 1), (1, 1), (1, -1)):
                signs = [0, 0, 0]
                signs[axis], signs[others[0]], signs[others[1]] = sign, pb, pc
                corners.append(_corner_index(tuple(signs)))
            faces.append((axis, sign, tuple(corners)))
    return faces


_CUBE_FACES = _build_faces()


def _draw_cube(surface: pygame.Surface, camera: Camera3D, center: Vec3, size: Vec3) -> None:
    width, height = surface.get_size()
    vertices = cube_vertices(center, *size)
    _, _, forward = _camera_basis(camera)
    edges: set[frozenset[int]] = set()

    for axis, sign, corners in _CUBE_FACES:
        normal = tuple(float(sign) if i == axis else 0.0 for i in range(3))
        face_center = tuple(center[i] + normal[i] * size[i] / 2.0 for i in range(3))
        if camera.projection is Projection.ORTHOGRAPHIC:
            facing = -_dot(normal, forward)
        else:
            facing = _dot(normal, _sub(camera.position, face_center))
        if facing <= 0.0:
            continue
        points = [project_point(camera, vertices[c], width, height) for c in corners]
        if any(p is None for p in points):
            continue
        pygame.draw.polygon(surface, CUBE_COLOR, points)
        edges.update(frozenset(pair) for pair in zip(corners, corners[1:] + corners[:1]))

    for edge in edges:
        a, b = sorted(edge)
        start = project_point(camera, vertices[a], width, height)
        end = project_point(camera, vertices[b], width, height)
        if start is not None and end is not None:
            pygame.draw.line(surface, WIRE_COLOR, start, end)


class Renderer(IRenderer):
    """Clears the display and draws a cube seen from a perspective camera."""

    def __init__(self) -> None:
        self.camera = Camera3D()
        self.rotation = 0.0
        self._surface: pygame.Surface | None = None
        self._scene_camera: Camera3D | None = None

    def initialize(self) -> bool:
        """Set up the camera; logs and returns False when no window is ready."""
        if not pygame.display.get_init() or pygame.display.get_surface() is None:
            Log.core_logger().error("Renderer initialization failed: window is not ready")
            return False

        try:
            pygame.Surface((1, 1))
        except pygame.error:
            Log.core_logger().error("Failed to create render texture")
            return False

        self.camera = Camera3D(
            position=(10.0, 10.0, 10.0),
            target=(0.0, 0.0, 0.0),
            up=(0.0, 1.0, 0.0),
            fovy=45.0,
            projection=Projection.PERSPECTIVE,
        )
        return True

    def shutdown(self) -> None:
        self._surface = None
        self._scene_camera = None

    def _display_surface(self) -> pygame.Surface:
        surface = pygame.display.get_surface() if pygame.display.get_init() else None
        if surface is None:
            raise RuntimeError("no display surface to render to")
        return surface

    def begin_frame(self) -> None:
        self._surface = self._display_surface()
        self._surface.fill(BACKGROUND_COLOR)

    def end_frame(self) -> None:
        self._display_surface()
        pygame.display.flip()
        self._surface = None

    def begin_scene(self) -> None:
        self._scene_camera = self.camera

    def end_scene(self) -> None:
        surface = self._surface or self._display_surface()
        camera = self._scene_camera or self.camera
        _draw_cube(surface, camera, (0.0, 0.0, 0.0), (2.0, 2.0, 2.0))
        self._scene_camera = None