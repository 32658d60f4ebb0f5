"""Minimal writer for uncompressed 24-bit BMP images."""

from __future__ import annotations

import os
import struct

BYTES_PER_PIXEL = 3
FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40


def bitmap_file_header(height: int, stride: int) -> bytes:
    """The 14-byte BMP file header for ``height`` rows of ``stride`` bytes."""
    file_size = FILE_HEADER_SIZE + INFO_HEADER_SIZE + stride * height
    return struct.pack(
        "<2sIHHI",
        b"BM",
        file_size & 0xFFFFFFFF,
        0,
        0,
        FILE_HEADER_SIZE + INFO_HEADER_SIZE,
    )


def bitmap_info_header(height: int, width: int) -> bytes:
    """The 40-byte BITMAPINFOHEADER for an uncompressed 24-bit image."""
    return struct.pack(
        "<IiiHHIIiiII",
        INFO_HEADER_SIZE,
        width,
        height,
        1,
        BYTES_PER_PIXEL * 8,
        0,
        0,
        0,
        0,
        0,
        0,
    )


def write_bitmap(image: bytes, height: int, width: int, path: str | os.PathLike) -> None:
    """Write ``height`` rows of ``width`` BGR pixels from ``image`` to ``path``."""
    width_in_bytes = width * BYTES_PER_PIXEL
    needed = width_in_bytes * height
    if len(image) < needed:
        raise ValueError(f"image holds {len(image)} bytes, {needed} needed")
    padding = bytes((4 - width_in_bytes % 4) % 4)
    stride = width_in_bytes + len(padding)
    with open(path, "wb") as fout:
        fout.write(bitmap_file_header(height, stride))
        fout.write(bitmap_info_header(height, width))
        for row in range(height):
            start = row * width_in_bytes
            fout.write(image[start:start + width_in_bytes])
            fout.write(padding)