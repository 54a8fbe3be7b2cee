"""Display properties (window, font, circles, rectangles) read from JSON."""

import argparse
import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from os import PathLike
from typing import Any, ClassVar

DEFAULT_INPUT = "../json_test/input/input.json"


class PropertyError(ValueError):
    """Raised when a property description cannot be read or understood."""


def _get(data: Any, key: str) -> Any:
    if not isinstance(data, Mapping):
        raise PropertyError(f"expected an object holding {key!r}")
    try:
        return data[key]
    except KeyError:
        raise PropertyError(f"missing key {key!r}") from None


def _int(data: Any, key: str) -> int:
    value = _get(data, key)
    if isinstance(value, (int, float)):
        return int(value)
    raise PropertyError(f"{key!r} must be a number")


def _float(data: Any, key: str) -> float:
    value = _get(data, key)
    if isinstance(value, (int, float)):
        return float(value)
    raise PropertyError(f"{key!r} must be a number")


def _str(data: Any, key: str) -> str:
    value = _get(data, key)
    if isinstance(value, str):
        return value
    raise PropertyError(f"{key!r} must be a string")


@dataclass
class Size:
    """Width and height in pixels."""

    width: int = 0
    height: int = 0

    def __str__(self) -> str:
        return f"{self.width}, {self.height}"


@dataclass
class ColorRGB:
    """Colour with red, green and blue components in 0..255."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __str__(self) -> str:
        return f"{self.r}, {self.g}, {self.b}"


@dataclass
class Position:
    """Position in pixels."""

    x: int = 0
    y: int = 0

    def __str__(self) -> str:
        return f"{self.x}, {self.y}"


@dataclass
class Speed:
    """Speed in pixels per frame."""

    sx: float = 0.0
    sy: float = 0.0

    def __str__(self) -> str:
        return f"{self.sx:g}, {self.sy:g}"


def _size(data: Any) -> Size:
    return Size(_int(data, "width"), _int(data, "height"))


def _color(data: Any) -> ColorRGB:
    return ColorRGB(_int(data, "r"), _int(data, "g"), _int(data, "b"))


def _position(data: Any) -> Position:
    return Position(_int(data, "x"), _int(data, "y"))


def _speed(data: Any) -> Speed:
    return Speed(_float(data, "sx"), _float(data, "sy"))


class Property:
    """Common base of all properties; ``id`` names the kind."""

    id: ClassVar[str]


@dataclass
class Window(Property):
    """Application window."""

    id: ClassVar[str] = "window"
    size: Size = field(default_factory=Size)

    @classmethod
    def from_json(cls, data: Any) -> "Window":
        return cls(size=_size(_get(data, "size")))

    def __str__(self) -> str:
        return f"size: {self.size}"


@dataclass
class Font(Property):
    """Font file, size in points and colour."""

    id: ClassVar[str] = "font"
    ffile: str = ""
    fsize: int = 12
    color: ColorRGB = field(default_factory=ColorRGB)

    @classmethod
    def from_json(cls, data: Any) -> "Font":
        return cls(
            ffile=_str(data, "ffile"),
            fsize=_int(data, "fsize"),
            color=_color(_get(data, "color_rgb")),
        )

    def __str__(self) -> str:
        return f"ffile: {self.ffile}\nfsize: {self.fsize}\ncolor_rgb: {self.color}"


@dataclass
class Circle(Property):
    """Named moving circle."""

    id: ClassVar[str] = "circle"
    name: str = ""
    position: Position = field(default_factory=Position)
    speed: Speed = field(default_factory=Speed)
    color: ColorRGB = field(default_factory=ColorRGB)
    radius: int = 0

    @classmethod
    def from_json(cls, data: Any) -> "Circle":
        return cls(
            name=_str(data, "name"),
            position=_position(_get(data, "position")),
            speed=_speed(_get(data, "speed")),
            color=_color(_get(data, "color_rgb")),
            radius=_int(data, "radius"),
        )

    def __str__(self) -> str:
        return (
            f"name: {self.name}\npos: {self.position}\nspd: {self.speed}\n"
            f"color_rgb: {self.color}\nradius: {self.radius}"
        )


@dataclass
class Rectangle(Property):
    """Named moving rectangle."""

    id: ClassVar[str] = "rectangle"
    name: str = ""
    position: Position = field(default_factory=Position)
    speed: Speed = field(default_factory=Speed)
    color: ColorRGB = field(default_factory=ColorRGB)
    size: Size = field(default_factory=Size)

    @classmethod
    def from_json(cls, data: Any) -> "Rectangle":
        return cls(
            name=_str(data, "name"),
            position=_position(_get(data, "position")),
            speed=_speed(_get(data, "speed")),
            color=_color(_get(data, "color_rgb")),
            size=_size(_get(data, "size")),
        )

    def __str__(self) -> str:
        return (
            f"name: {self.name}\npos: {self.position}\nspd: {self.speed}\n"
            f"color_rgb: {self.color}\nsize: {self.size}"
        )


_SINGLE = {cls.id: cls for cls in (Window, Font, Circle, Rectangle)}
_LISTS = {"circles": Circle, "rectangles": Rectangle}


def _load(fname: str | PathLike) -> Any:
    try:
        with open(fname, encoding="utf-8") as fh:
            return json.load(fh)
    except OSError as err:
        raise PropertyError("Could not open input file.") from err
    except json.JSONDecodeError as err:
        raise PropertyError(f"invalid JSON: {err}") from err


def _parse(data: Any) -> Iterator[Property]:
    if not isinstance(data, Mapping):
        raise PropertyError("the input must hold a JSON object")
    for key, value in data.items():
        if key in _SINGLE:
            yield _SINGLE[key].from_json(value)
        elif key in _LISTS:
            cls = _LISTS[key]
            if not isinstance(value, list):
                raise PropertyError(f"{key!r} must be a list")
            for elem in value:
                yield cls.from_json(_get(elem, cls.id))
        else:
            raise PropertyError("Unknown property in input file.")


def read_properties(fname: str | PathLike) -> list[Property]:
    """Read all properties from a JSON file, in file order."""
    return list(_parse(_load(fname)))


def main(argv: list[str] | None = None) -> int:
    """Read a property file and print what was found."""
    parser = argparse.ArgumentParser(description="Read display properties from JSON.")
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT)
    args = parser.parse_args(argv)

    props: list[Property] = []
    try:
        data = _load(args.input)
        print(json.dumps(data, indent=2, ensure_ascii=False), end="\n\n")
        for prop in _parse(data):
            print(f"{prop.id}:\n{prop}\n")
            props.append(prop)
    except PropertyError as err:
        print(f"Error: {err}")

    for prop in props:
        print(f"id = {prop.id}")
        print(f"{prop}\n")
    return 0