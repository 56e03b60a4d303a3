"""Interactive window: load a scene and walk through it with the keyboard."""

from __future__ import annotations

import os
import sys
from typing import Iterable, List, Optional, Sequence, Union

import numpy as np
import pygame

from .raycast import HEIGHT, WIDTH, Action, Camera, Grid, render_frame
from .scene import SceneError, parse_file

MAP_WIDTH = 19
START_POSITION = 10.5
START_DIRECTION = "W"

_KEY_ACTIONS = {
    pygame.K_w: Action.FORWARD,
    pygame.K_s: Action.BACKWARD,
    pygame.K_d: Action.RIGHT,
    pygame.K_a: Action.LEFT,
    pygame.K_LEFT: Action.TURN_LEFT,
    pygame.K_RIGHT: Action.TURN_RIGHT,
    pygame.K_ESCAPE: Action.QUIT,
}


def load_textures(paths: Iterable[Union[str, os.PathLike]]) -> List[np.ndarray]:
    """Load images as (rows, columns) arrays of packed 0xRRGGBB pixels."""
    textures = []
    for path in paths:
        try:
            surface = pygame.image.load(os.fspath(path))
        except (pygame.error, OSError) as exc:
            raise SceneError(f"Failed to load texture {path}") from exc
        rgb = pygame.surfarray.array3d(surface).astype(np.uint32)
        packed = (rgb[..., 0] << 16) | (rgb[..., 1] << 8) | rgb[..., 2]
        textures.append(np.ascontiguousarray(packed.T))
    return textures


def action_for_key(key: int) -> Optional[Action]:
    """The action bound to a pygame key code, or None."""
    return _KEY_ACTIONS.get(key)


def _to_rgb(frame: np.ndarray) -> np.ndarray:
    channels = [(frame >> 16) & 0xFF, (frame >> 8) & 0xFF, frame & 0xFF]
    return np.stack(channels, axis=-1).transpose(1, 0, 2).astype(np.uint8)


def _show_prompt(screen: pygame.Surface) -> None:
    font = pygame.font.Font(None, 24)
    text = font.render("Press any Key", True, (255, 255, 255))
    screen.blit(text, (WIDTH // 2 - 20, HEIGHT // 2))
    pygame.display.flip()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: cubcaster <scene_file.cub>", file=sys.stderr)
        return 1
    try:
        config = parse_file(args[0])
    except SceneError:
        print("Failed to parse the .cub file", file=sys.stderr)
        return 1
    grid = Grid(config.map, MAP_WIDTH)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Cub3D")
        try:
            textures = load_textures(config.texture_paths())
        except SceneError as exc:
            print(exc)
            return 1
        _show_prompt(screen)

        camera = Camera()
        camera.set_direction(START_DIRECTION)
        camera.pos_x = camera.pos_y = START_POSITION

        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type != pygame.KEYDOWN:
                continue
            action = action_for_key(event.key)
            if action is Action.QUIT:
                return 0
            if action is not None:
                camera.apply(action, grid)
            frame = render_frame(
                camera, grid, textures, config.ceiling_color, config.floor_color
            )
            pygame.surfarray.blit_array(screen, _to_rgb(frame))
            pygame.display.flip()
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())