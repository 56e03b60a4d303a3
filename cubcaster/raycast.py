"""Grid ray casting and textured column rendering."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

WIDTH = 1920
HEIGHT = 1080

_DIRECTIONS = {
    "N": (0.0, -1.0, 0.66, 0.0),
    "S": (0.0, 1.0, -0.66, 0.0),
    "E": (1.0, 0.0, 0.0, 0.66),
    "W": (-1.0, 0.0, 0.0, -0.66),
}


class Grid:
    """A map of character cells; ``'0'`` is open floor."""

    def __init__(self, rows: Iterable[str], width: Optional[int] = None) -> None:
        self.rows = list(rows)
        self.height = len(self.rows)
        if width is None:
            width = max((len(row) for row in self.rows), default=0)
        self.width = width

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _cell(self, x: int, y: int) -> str:
        row = self.rows[y]
        return row[x] if x < len(row) else "\0"

    def is_open(self, x: int, y: int) -> bool:
        """True if the player may stand in cell (x, y)."""
        return self._in_bounds(x, y) and self._cell(x, y) == "0"

    def blocks_ray(self, x: int, y: int) -> bool:
        """True if a ray stops at cell (x, y): outside the grid or above '0'."""
        if not self._in_bounds(x, y):
            return True
        return self._cell(x, y) > "0"


class Action(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    RIGHT = "right"
    LEFT = "left"
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"
    QUIT = "quit"


@dataclass(frozen=True)
class RayHit:
    """Where a ray met a wall."""

    map_x: int
    map_y: int
    side: int
    distance: float
    ray_dir_x: float
    ray_dir_y: float
    texture_index: int
    wall_x: float


@dataclass
class Camera:
    """Player position, view direction and camera plane."""

    pos_x: float = 10.0
    pos_y: float = 10.0
    dir_x: float = -1.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.66
    move_speed: float = 0.3
    rot_speed: float = 0.1

    def set_direction(self, direction: str) -> None:
        """Face N, S, E or W; anything else faces north."""
        self.dir_x, self.dir_y, self.plane_x, self.plane_y = _DIRECTIONS.get(
            direction, _DIRECTIONS["N"]
        )

    def move(self, grid: Grid, dx: float, dy: float) -> None:
        """Move by (dx, dy), checking each axis against the grid separately."""
        if grid.is_open(int(self.pos_x + dx), int(self.pos_y)):
            self.pos_x += dx
        if grid.is_open(int(self.pos_x), int(self.pos_y + dy)):
            self.pos_y += dy

    def rotate(self, angle: float) -> None:
        """Rotate direction and plane by ``angle`` radians."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )

    def apply(self, action: Action, grid: Grid) -> None:
        """Carry out a movement or turn; QUIT leaves the camera unchanged."""
        speed = self.move_speed
        if action is Action.FORWARD:
            self.move(grid, self.dir_x * speed, self.dir_y * speed)
        elif action is Action.BACKWARD:
            self.move(grid, -self.dir_x * speed, -self.dir_y * speed)
        elif action is Action.RIGHT:
            self.move(grid, self.plane_x * speed, self.plane_y * speed)
        elif action is Action.LEFT:
            self.move(grid, -self.plane_x * speed, -self.plane_y * speed)
        elif action is Action.TURN_LEFT:
            self.rotate(-self.rot_speed)
        elif action is Action.TURN_RIGHT:
            self.rotate(self.rot_speed)


def cast_ray(camera: Camera, grid: Grid, camera_x: float) -> RayHit:
    """Cast one ray; ``camera_x`` runs from -1 (left edge) to 1 (right edge)."""
    ray_dir_x = camera.dir_x + camera.plane_x * camera_x
    ray_dir_y = camera.dir_y + camera.plane_y * camera_x
    map_x, map_y = int(camera.pos_x), int(camera.pos_y)
    delta_x = 1e30 if ray_dir_x == 0 else abs(1 / ray_dir_x)
    delta_y = 1e30 if ray_dir_y == 0 else abs(1 / ray_dir_y)

    if ray_dir_x < 0:
        step_x, side_x = -1, (camera.pos_x - map_x) * delta_x
    else:
        step_x, side_x = 1, (map_x + 1.0 - camera.pos_x) * delta_x
    if ray_dir_y < 0:
        step_y, side_y = -1, (camera.pos_y - map_y) * delta_y
    else:
        step_y, side_y = 1, (map_y + 1.0 - camera.pos_y) * delta_y

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if grid.blocks_ray(map_x, map_y):
            break

    if side == 0:
        distance = (map_x - camera.pos_x + (1 - step_x) // 2) / ray_dir_x
        texture_index = 2 if ray_dir_x > 0 else 1
        wall_x = camera.pos_y + distance * ray_dir_y
    else:
        distance = (map_y - camera.pos_y + (1 - step_y) // 2) / ray_dir_y
        texture_index = 3 if ray_dir_y > 0 else 0
        wall_x = camera.pos_x + distance * ray_dir_x
    wall_x -= math.floor(wall_x)
    return RayHit(map_x, map_y, side, distance, ray_dir_x, ray_dir_y, texture_index, wall_x)


def _pack(color: Tuple[int, int, int]) -> int:
    red, green, blue = color
    return ((red << 16) + (green << 8) + blue) & 0xFFFFFFFF


def render_frame(
    camera: Camera,
    grid: Grid,
    textures: Sequence[np.ndarray],
    ceiling: Tuple[int, int, int],
    floor: Tuple[int, int, int],
    width: int = WIDTH,
    height: int = HEIGHT,
) -> np.ndarray:
    """Render a frame as a (height, width) array of packed 0xRRGGBB pixels.

    ``textures`` holds four (rows, columns) arrays of packed pixels, indexed
    by :attr:`RayHit.texture_index`.
    """
    maps = [np.asarray(texture, dtype=np.uint32) for texture in textures]
    if len(maps) < 4:
        raise ValueError("four textures are required")
    frame = np.empty((height, width), dtype=np.uint32)
    frame[: height // 2] = _pack(ceiling)
    frame[height // 2 :] = _pack(floor)

    for x in range(width):
        hit = cast_ray(camera, grid, 2 * x / width - 1)
        line_height = int(height / hit.distance) if hit.distance > 0 else height
        draw_start = max(-(line_height // 2) + height // 2, 0)
        draw_end = min(line_height // 2 + height // 2, height - 1)
        if draw_end <= draw_start:
            continue

        texture = maps[hit.texture_index]
        tex_height, tex_width = texture.shape
        tex_x = min(int(hit.wall_x * tex_width), tex_width - 1)
        if (hit.side == 0 and hit.ray_dir_x > 0) or (hit.side == 1 and hit.ray_dir_y < 0):
            tex_x = tex_width - tex_x - 1

        step = tex_height / line_height
        tex_pos = (draw_start - height // 2 + line_height // 2) * step
        positions = tex_pos + step * np.arange(draw_end - draw_start)
        tex_y = positions.astype(np.int64) & (tex_height - 1)
        column = texture[tex_y, tex_x]
        if hit.side == 1:
            column = (column >> 1) & 0x7F7F7F
        frame[draw_start:draw_end, x] = column
    return frame