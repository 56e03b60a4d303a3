"""Scene description files: wall textures, floor and ceiling colours, and the map."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple, Union

from .lines import read_lines
from .strutil import atoi, split

Color = Tuple[int, int, int]

UNSET_COLOR: Color = (-1, -1, -1)

_TEXTURE_KEYS = {
    "NO": "texture_no",
    "SO": "texture_so",
    "WE": "texture_we",
    "EA": "texture_ea",
}


class SceneError(Exception):
    """Raised when a scene file cannot be read or holds an invalid entry."""


def ltrim(text: str) -> str:
    """Strip leading spaces and tabs."""
    return text.lstrip(" \t")


def parse_color(text: str) -> Color:
    """Parse an ``R,G,B`` triple; extra components are ignored."""
    parts = split(text, ",")
    if len(parts) < 3:
        raise SceneError(f"colour needs three components: {text!r}")
    red, green, blue = (atoi(part) for part in parts[:3])
    return red, green, blue


@dataclass
class SceneConfig:
    """Everything a scene file defines."""

    texture_no: Optional[str] = None
    texture_so: Optional[str] = None
    texture_we: Optional[str] = None
    texture_ea: Optional[str] = None
    floor_color: Color = UNSET_COLOR
    ceiling_color: Color = UNSET_COLOR
    map: List[str] = field(default_factory=list)

    @property
    def map_lines(self) -> int:
        """Number of map rows read so far."""
        return len(self.map)

    def process_line(self, line: str) -> None:
        """Apply one line of a scene file (without its newline) to this config."""
        trimmed = ltrim(line)
        attribute = _TEXTURE_KEYS.get(trimmed[:2])
        if attribute is not None:
            setattr(self, attribute, ltrim(trimmed[2:]))
        elif trimmed[:1] == "F":
            self.floor_color = parse_color(ltrim(trimmed[1:]))
        elif trimmed[:1] == "C":
            self.ceiling_color = parse_color(ltrim(trimmed[1:]))
        elif trimmed:
            self.map.append(trimmed)

    def texture_paths(self) -> Tuple[str, str, str, str]:
        """Texture paths in east, north, south, west order."""
        paths = (self.texture_ea, self.texture_no, self.texture_so, self.texture_we)
        names = ("EA", "NO", "SO", "WE")
        missing = [name for name, path in zip(names, paths) if path is None]
        if missing:
            raise SceneError(f"missing texture entries: {', '.join(missing)}")
        east, north, south, west = paths
        return east, north, south, west  # type: ignore[return-value]


def parse_lines(lines: Iterable[str]) -> SceneConfig:
    """Build a config from the lines of a scene file."""
    config = SceneConfig()
    for line in lines:
        if line.endswith("\n"):
            line = line[:-1]
        config.process_line(line)
    return config


def parse_file(path: Union[str, os.PathLike]) -> SceneConfig:
    """Read and parse the scene file at ``path``."""
    try:
        handle = open(path, encoding="utf-8", errors="surrogateescape", newline="")
    except OSError as exc:
        raise SceneError(f"cannot open scene file {path}: {exc}") from exc
    with handle:
        return parse_lines(read_lines(handle))