"""Reading compressed DirectDraw Surface (DDS) textures."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

__all__ = ["CompressType", "DDSInfo"]

_MAGIC = b"DDS "
_HEADER_SIZE = 124
# magic, dwSize, dwFlags, height, width, pitch, depth, mip count,
# 11 reserved words, pixel format size and flags, then the FourCC code.
_HEADER = struct.Struct("<4s7I44x8x4s")


class CompressType(Enum):
    """Block compression of the texture data."""

    NONE = auto()
    DXT1 = auto()
    DXT3 = auto()
    DXT5 = auto()


_FOURCC = {
    b"DXT1": CompressType.DXT1,
    b"DXT3": CompressType.DXT3,
    b"DXT5": CompressType.DXT5,
}


@dataclass(frozen=True)
class DDSInfo:
    """Size, mip map count, compression and raw data of a DDS texture."""

    height: int = 0
    width: int = 0
    mip_map_count: int = 0
    compress_type: CompressType = CompressType.NONE
    data: bytes = b""

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> DDSInfo:
        """Read a DDS file; an unreadable file or one without the DDS magic gives empty info."""
        try:
            blob = Path(path).read_bytes()
        except OSError:
            return cls()
        if blob[: len(_MAGIC)] != _MAGIC:
            return cls()
        if len(blob) < len(_MAGIC) + _HEADER_SIZE:
            raise ValueError("truncated DDS header")
        _magic, _size, _flags, height, width, _pitch, _depth, mips, fourcc = (
            _HEADER.unpack_from(blob)
        )
        return cls(
            height=height,
            width=width,
            mip_map_count=mips,
            compress_type=_FOURCC.get(fourcc, CompressType.NONE),
            data=blob[len(_MAGIC) + _HEADER_SIZE :],
        )