"""PNG image paths, loading and saving of 8-bit RGBA pixel data."""

from __future__ import annotations

from enum import Enum
from pathlib import Path, PurePath
from typing import BinaryIO, List, Sequence, Tuple, Union

from PIL import Image

from pixelkit.color import Rgba8, align, to_bytes
from pixelkit.pixels import scale as _scale_image

PathLike = Union[str, PurePath]

_DECODE_ERRORS = (OSError, ValueError, SyntaxError, EOFError)


class _Encoding(Enum):
    PNG = "png"


class ImagePath:
    """A path to an image file whose extension names a supported encoding."""

    def __init__(self, parent: PathLike, name: str) -> None:
        self._parent = Path(parent)
        self._name = name
        self._encoding = _Encoding.PNG

    @classmethod
    def from_path(cls, path: PathLike) -> "ImagePath":
        """Split a path into directory, stem and encoding; raise ``ValueError`` if invalid."""
        p = PurePath(path)
        name = p.name
        if not name or name in (".", "..") or p.suffix != "." + _Encoding.PNG.value:
            raise ValueError(f"`{path}` is not a valid path")
        return cls(p.parent, p.stem)

    def file_stem(self) -> str:
        return self._name

    def extension(self) -> str:
        return self._encoding.value

    def parent(self) -> Path:
        return self._parent

    def __str__(self) -> str:
        return f"{self._parent / self._name}.{self._encoding.value}"

    def __repr__(self) -> str:
        return f"ImagePath({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImagePath):
            return NotImplemented
        return (self._parent, self._name, self._encoding) == (
            other._parent,
            other._name,
            other._encoding,
        )

    def __hash__(self) -> int:
        return hash((self._parent, self._name, self._encoding))


def read(stream: BinaryIO) -> Tuple[bytes, int, int]:
    """Decode an 8-bit RGBA PNG, returning its raw pixel bytes, width and height."""
    try:
        img = Image.open(stream, formats=["PNG"])
    except _DECODE_ERRORS as e:
        raise ValueError("decoding failed") from e
    with img:
        if img.mode != "RGBA":
            raise ValueError("only 8-bit RGBA images are supported")
        try:
            img.load()
            data = img.tobytes()
        except _DECODE_ERRORS as e:
            raise ValueError("decoding failed") from e
        width, height = img.size
    return data, width, height


def load(path: PathLike) -> Tuple[bytes, int, int]:
    """Read and decode the PNG file at ``path``."""
    try:
        f = open(path, "rb")
    except OSError as e:
        raise OSError(e.errno, f"error opening {path}: {e.strerror or e}") from e
    with f:
        try:
            return read(f)
        except ValueError as e:
            raise ValueError(f"error loading {path}: {e}") from e


def write(out: BinaryIO, w: int, h: int, scale: int, pixels: Sequence[Rgba8]) -> None:
    """Encode a ``w`` by ``h`` image as PNG, enlarged by an integer ``scale``."""
    if scale == 1:
        if len(pixels) != w * h:
            raise ValueError(f"image has {len(pixels)} pixels, expected {w}x{h}={w * h}")
        data = to_bytes(pixels)
    else:
        data = to_bytes(_scale_image(pixels, w, h, scale))
    img = Image.frombytes("RGBA", (w * scale, h * scale), data)
    img.save(out, format="PNG")


def save_as(path: PathLike, w: int, h: int, scale: int, pixels: Sequence[Rgba8]) -> None:
    """Encode the image as PNG into the file at ``path``."""
    with open(path, "wb") as f:
        write(f, w, h, scale, pixels)


def load_image(path: PathLike) -> Tuple[int, int, List[Rgba8]]:
    """Load a PNG file as its width, height and pixels."""
    data, width, height = load(path)
    return width, height, align(data)