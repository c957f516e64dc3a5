"""Plain data types shared by the graphics layer: error codes, settings,
textures, image instances, key events and vertices."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, unique
from typing import Dict

from .mlx_keys import Action, Key, ModifierKey

__all__ = [
    "ErrorCode",
    "Setting",
    "Texture",
    "Xpm",
    "Instance",
    "KeyData",
    "Vertex",
    "default_settings",
]

BYTES_PER_PIXEL = 4

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_UINT32_MAX = 2**32 - 1


def _check_int(name: str, value: int, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not low <= value <= high:
        raise ValueError(f"{name} must lie in [{low}, {high}], got {value}")


@unique
class ErrorCode(IntEnum):
    """Codes that identify what went wrong in the graphics layer."""

    SUCCESS = 0
    INVEXT = 1
    INVFILE = 2
    INVPNG = 3
    INVXPM = 4
    INVPOS = 5
    INVDIM = 6
    INVIMG = 7
    VERTFAIL = 8
    FRAGFAIL = 9
    SHDRFAIL = 10
    MEMFAIL = 11
    GLADFAIL = 12
    GLFWFAIL = 13
    WINFAIL = 14
    STRTOOBIG = 15

    @property
    def description(self) -> str:
        """A short English description of the code."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorCode.SUCCESS: "No errors",
    ErrorCode.INVEXT: "File has an invalid extension",
    ErrorCode.INVFILE: "File was invalid / does not exist",
    ErrorCode.INVPNG: "Something is wrong with the given PNG file",
    ErrorCode.INVXPM: "Something is wrong with the given XPM file",
    ErrorCode.INVPOS: "The specified X/Y positions are out of bounds",
    ErrorCode.INVDIM: "The specified W/H dimensions are out of bounds",
    ErrorCode.INVIMG: "The provided image is invalid",
    ErrorCode.VERTFAIL: "Failed to compile the vertex shader",
    ErrorCode.FRAGFAIL: "Failed to compile the fragment shader",
    ErrorCode.SHDRFAIL: "Failed to compile the shaders",
    ErrorCode.MEMFAIL: "Dynamic memory allocation has failed",
    ErrorCode.GLADFAIL: "OpenGL loader has failed",
    ErrorCode.GLFWFAIL: "GLFW failed to initialize",
    ErrorCode.WINFAIL: "Failed to create a window",
    ErrorCode.STRTOOBIG: "The string is too big to be drawn",
}


@unique
class Setting(IntEnum):
    """Global settings that shape behaviour; set them before initialising."""

    STRETCH_IMAGE = 0
    FULLSCREEN = 1
    MAXIMIZED = 2
    DECORATED = 3
    HEADLESS = 4


def default_settings() -> Dict[Setting, bool]:
    """Return a fresh mapping of every setting to its default value."""
    return {
        Setting.STRETCH_IMAGE: False,
        Setting.FULLSCREEN: False,
        Setting.MAXIMIZED: False,
        Setting.DECORATED: True,
        Setting.HEADLESS: False,
    }


@dataclass
class Texture:
    """RGBA pixel data loaded from disk, stored row by row."""

    width: int
    height: int
    pixels: bytearray
    bytes_per_pixel: int = BYTES_PER_PIXEL

    def __post_init__(self) -> None:
        _check_int("width", self.width, 0, _UINT32_MAX)
        _check_int("height", self.height, 0, _UINT32_MAX)
        if self.bytes_per_pixel != BYTES_PER_PIXEL:
            raise ValueError(
                f"only {BYTES_PER_PIXEL} bytes per pixel are supported, "
                f"got {self.bytes_per_pixel}"
            )
        self.pixels = bytearray(self.pixels)
        expected = self.width * self.height * self.bytes_per_pixel
        if len(self.pixels) != expected:
            raise ValueError(
                f"pixel data holds {len(self.pixels)} bytes, expected {expected}"
            )

    @classmethod
    def blank(cls, width: int, height: int) -> "Texture":
        """Return a texture of the given size with every byte zero."""
        _check_int("width", width, 0, _UINT32_MAX)
        _check_int("height", height, 0, _UINT32_MAX)
        return cls(width, height, bytearray(width * height * BYTES_PER_PIXEL))

    def pixel_at(self, x: int, y: int) -> int:
        """Return the pixel at (x, y) packed as 0xRRGGBBAA."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) lies outside a {self.width}x{self.height} texture"
            )
        offset = (y * self.width + x) * self.bytes_per_pixel
        return int.from_bytes(self.pixels[offset:offset + self.bytes_per_pixel], "big")


@dataclass
class Xpm:
    """An XPM image: its texture plus the palette information read from the file."""

    texture: Texture
    color_count: int
    cpp: int
    mode: str

    def __post_init__(self) -> None:
        _check_int("color_count", self.color_count, 0, _INT32_MAX)
        _check_int("cpp", self.cpp, 1, _INT32_MAX)
        if self.mode not in ("c", "m"):
            raise ValueError(f"mode must be 'c' (color) or 'm' (monochrome), got {self.mode!r}")


@dataclass
class Instance:
    """One placement of an image: its position, depth and visibility."""

    x: int
    y: int
    z: int = 0
    enabled: bool = True

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            _check_int(name, getattr(self, name), _INT32_MIN, _INT32_MAX)


@dataclass(frozen=True)
class KeyData:
    """What a key callback receives: the key, the action and the modifiers held."""

    key: Key
    action: Action
    os_key: int
    modifier: ModifierKey = field(default=ModifierKey(0))

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", Key(self.key))
        object.__setattr__(self, "action", Action(self.action))
        object.__setattr__(self, "modifier", ModifierKey(self.modifier))
        _check_int("os_key", self.os_key, _INT32_MIN, _INT32_MAX)


@dataclass(frozen=True)
class Vertex:
    """A single vertex: position, texture coordinates and texture slot."""

    x: float
    y: float
    z: float
    u: float
    v: float
    tex: int

    def __post_init__(self) -> None:
        _check_int("tex", self.tex, -128, 127)
        for name in ("x", "y", "z", "u", "v"):
            object.__setattr__(self, name, float(getattr(self, name)))