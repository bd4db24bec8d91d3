"""Multi-channel images stored as interleaved pixels of one element depth."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from hpcmat.mat import Depth


class Image:
    """An image of ``rows`` x ``cols`` pixels with ``channels`` values each.

    Pixel values are interleaved: the channels of one pixel are adjacent,
    and pixels follow each other in row-major order.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        channels: int = 1,
        depth: Depth = Depth.U8,
        data: Iterable | np.ndarray | None = None,
    ) -> None:
        if rows < 0 or cols < 0 or channels < 1:
            raise ValueError(
                f"invalid image size {rows} x {cols} x {channels}"
            )
        self.rows = rows
        self.cols = cols
        self.channels = channels
        self.depth = depth
        shape = (rows, cols, channels)
        if data is None:
            self.data = np.zeros(shape, dtype=depth.dtype)
        else:
            flat = np.array(
                data if isinstance(data, np.ndarray) else list(data)
            ).reshape(-1)
            expected = rows * cols * channels
            if flat.size != expected:
                raise ValueError(
                    f"data holds {flat.size} elements, expected {expected}"
                )
            with np.errstate(invalid="ignore", over="ignore"):
                self.data = flat.astype(depth.dtype).reshape(shape)

    @property
    def itemsize(self) -> int:
        return self.depth.itemsize

    @property
    def size(self) -> int:
        """Number of stored values, over all channels."""
        return self.rows * self.cols * self.channels

    def convert(self, depth: Depth) -> Image:
        """Return a new image holding these values cast to ``depth``.

        Converting another depth to 8-bit unsigned saturates values to
        [0, 255]; other conversions truncate floating values toward zero and
        let integers that do not fit wrap around.
        """
        converted = Image(self.rows, self.cols, self.channels, depth)
        values = self.data
        with np.errstate(invalid="ignore", over="ignore"):
            if depth is Depth.U8 and self.depth is not Depth.U8:
                values = np.clip(values, 0, 255)
            converted.data = values.astype(depth.dtype)
        return converted

    def copy(self) -> Image:
        """Return a deep copy of this image."""
        return self.convert(self.depth)

    def pixel(self, row: int, col: int, channel: int = 0):
        """Value of ``channel`` at pixel (``row``, ``col``)."""
        if not (0 <= row < self.rows and 0 <= col < self.cols
                and 0 <= channel < self.channels):
            raise IndexError(
                f"pixel ({row}, {col}, {channel}) outside "
                f"{self.rows} x {self.cols} x {self.channels} image"
            )
        return self.data[row, col, channel].item()

    def __repr__(self) -> str:
        return (
            f"Image({self.rows}, {self.cols}, {self.channels}, "
            f"{self.depth.name})"
        )