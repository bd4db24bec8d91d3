"""Utilities for :class:`~hpcmat.image.Image`: PNM files, borders,
colour conversion, channel splitting, initialisation and quality metrics."""

from __future__ import annotations

import math
import os
import random
from collections.abc import Sequence
from numbers import Number

import numpy as np

from hpcmat.image import Image
from hpcmat.mat import Depth

_WHITESPACE = b" \t\r\n\v\f"
_COLOR_MAGIC = {b"P3", b"P6"}
_GRAY_MAGIC = {b"P2", b"P5"}
_ASCII_MAGIC = {b"P2", b"P3"}


def _parse_header(raw: bytes) -> tuple[list[bytes], int]:
    """Return the four header tokens of a PNM file and the offset of the pixels."""
    tokens: list[bytes] = []
    pos = 0
    length = len(raw)
    while len(tokens) < 4:
        while pos < length and raw[pos] in _WHITESPACE:
            pos += 1
        if pos >= length:
            raise ValueError("truncated PNM header")
        if raw[pos] == ord("#"):
            end = raw.find(b"\n", pos)
            pos = length if end < 0 else end + 1
            continue
        start = pos
        while pos < length and raw[pos] not in _WHITESPACE:
            pos += 1
        tokens.append(raw[start:pos])
    # a single whitespace byte separates the header from the pixels
    return tokens, pos + 1


def read_pxm(path: str | os.PathLike) -> Image:
    """Read a grey (P2/P5) or colour (P3/P6) PNM file into an 8-bit image."""
    with open(path, "rb") as fh:
        raw = fh.read()
    tokens, offset = _parse_header(raw)
    magic = tokens[0]
    if magic in _COLOR_MAGIC:
        channels = 3
    elif magic in _GRAY_MAGIC:
        channels = 1
    else:
        raise ValueError(f"unsupported PNM format {magic!r}")
    try:
        cols, rows = int(tokens[1]), int(tokens[2])
        int(tokens[3])
    except ValueError as err:
        raise ValueError("malformed PNM header") from err
    size = rows * cols * channels
    if magic in _ASCII_MAGIC:
        values = [int(v) for v in raw[offset:].split()[:size]]
        if len(values) < size:
            raise ValueError("truncated PNM pixel data")
        pixels = np.array(values, dtype=np.int64)
    else:
        body = raw[offset:offset + size]
        if len(body) < size:
            raise ValueError("truncated PNM pixel data")
        pixels = np.frombuffer(body, dtype=np.uint8)
    return Image(rows, cols, channels, Depth.U8, pixels)


def write_pxm(path: str | os.PathLike, image: Image) -> None:
    """Write an 8-bit grey (P5) or colour (P6) image as a binary PNM file."""
    if image.depth is not Depth.U8:
        raise TypeError("only 8-bit unsigned images can be written")
    if image.channels == 1:
        magic = "P5"
    elif image.channels == 3:
        magic = "P6"
    else:
        raise ValueError(f"cannot write an image with {image.channels} channels")
    header = (
        f"{magic}\n# Created by Programming OUYOU\n"
        f"{image.cols} {image.rows}\n255\n"
    )
    with open(path, "wb") as fh:
        fh.write(header.encode("ascii"))
        fh.write(image.data.tobytes())
        fh.write(b"\n")


def copy_make_border(
    src: Image, top: int, bottom: int, left: int, right: int
) -> Image:
    """Return ``src`` enlarged by the given margins, replicating edge pixels."""
    if min(top, bottom, left, right) < 0:
        raise ValueError("border widths must not be negative")
    if (top or bottom) and src.rows == 0 or (left or right) and src.cols == 0:
        raise ValueError("cannot replicate the border of an empty image")
    padded = np.pad(
        src.data, ((top, bottom), (left, right), (0, 0)), mode="edge"
    )
    return Image(
        src.rows + top + bottom,
        src.cols + left + right,
        src.channels,
        src.depth,
        padded,
    )


def cvt_color_gray(src: Image) -> Image:
    """Return the grey image of a three-channel image, averaging the channels.

    Each grey value is ``(c0 + c1 + c2) * 0.3333 + 0.5`` in single precision;
    integer depths truncate the result.
    """
    if src.channels != 3:
        raise ValueError("colour conversion needs a three-channel image")
    if src.depth.is_float:
        total = src.data.astype(np.float32).sum(axis=2, dtype=np.float32)
    else:
        total = src.data.astype(np.int64).sum(axis=2).astype(np.float32)
    gray = total * np.float32(0.3333) + np.float32(0.5)
    with np.errstate(invalid="ignore", over="ignore"):
        values = gray.astype(src.depth.dtype)
    return Image(src.rows, src.cols, 1, src.depth, values)


def split(src: Image) -> list[Image]:
    """Return one single-channel image per channel of ``src``."""
    return [
        Image(src.rows, src.cols, 1, src.depth, src.data[:, :, k].copy())
        for k in range(src.channels)
    ]


def merge(planes: Sequence[Image]) -> Image:
    """Interleave single-channel images into one multi-channel image."""
    if not planes:
        raise ValueError("nothing to merge")
    first = planes[0]
    for plane in planes:
        if plane.channels != 1:
            raise ValueError("merge takes single-channel images")
        if (plane.rows, plane.cols) != (first.rows, first.cols):
            raise ValueError("planes differ in size")
        if plane.depth is not first.depth:
            raise TypeError("planes differ in depth")
    stacked = np.concatenate([p.data for p in planes], axis=2)
    return Image(first.rows, first.cols, len(planes), first.depth, stacked)


def image_zero(image: Image) -> None:
    """Set every value of ``image`` to zero."""
    image.data[...] = 0


def image_one(image: Image) -> None:
    """Set every value of ``image`` to one."""
    image.data[...] = 1


def image_rand(
    image: Image,
    low: Number,
    high: Number,
    rng: random.Random | None = None,
) -> None:
    """Fill ``image`` with uniform random values.

    Integer depths receive values in [low, high]; floating depths receive
    values in [low, high + 1).
    """
    source = rng if rng is not None else random
    draws = np.array([source.random() for _ in range(image.size)], dtype=np.float64)
    if image.depth.is_float:
        lo, hi = float(low), float(high)
        values = lo + draws * (hi - lo + 1.0)
    else:
        lo, hi = int(low), int(high)
        values = lo + np.floor(draws * (hi - lo + 1)).astype(np.int64)
    with np.errstate(invalid="ignore", over="ignore"):
        image.data[...] = values.reshape(image.data.shape).astype(image.depth.dtype)


def image_info(image: Image) -> None:
    """Print the shape and depth of ``image``."""
    print(
        f"[ {image.rows} x {image.cols} x {image.channels} ] "
        f"{image.depth.label:>3}"
    )


def calc_psnr(src1: Image, src2: Image) -> float:
    """Peak signal-to-noise ratio in dB for a peak of 255.

    Identical images give infinity.
    """
    if src1.channels != src2.channels:
        raise ValueError("error: different number of channels")
    if src1.rows != src2.rows or src1.cols != src2.cols:
        raise ValueError("error: different image size")
    diff = src1.data.astype(np.float64) - src2.data.astype(np.float64)
    sse = float(np.sum(diff * diff))
    if sse <= 1e-10:
        return math.inf
    mse = sse / src1.size
    return 10.0 * math.log10((255.0 * 255.0) / mse)