"""Dense two-dimensional matrices with a fixed element depth."""

from __future__ import annotations

import enum
import sys
from collections.abc import Iterable, Iterator

import numpy as np


class Depth(enum.Enum):
    """Element type of a matrix, named after its bit width and kind."""

    U8 = ("8U", np.uint8)
    S16 = ("16S", np.int16)
    S32 = ("32S", np.int32)
    F32 = ("32F", np.float32)
    F64 = ("64F", np.float64)

    def __init__(self, label: str, dtype: type) -> None:
        self.label = label
        self.dtype = np.dtype(dtype)

    @property
    def itemsize(self) -> int:
        """Size of one element in bytes."""
        return self.dtype.itemsize

    @property
    def is_float(self) -> bool:
        return self.dtype.kind == "f"


class Mat:
    """A row-major matrix of ``rows`` x ``cols`` elements of one depth."""

    def __init__(
        self,
        rows: int,
        cols: int,
        depth: Depth = Depth.F32,
        data: Iterable | np.ndarray | None = None,
    ) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"invalid matrix size {rows} x {cols}")
        self.rows = rows
        self.cols = cols
        self.depth = depth
        if data is None:
            self.data = np.zeros((rows, cols), dtype=depth.dtype)
        else:
            flat = np.array(
                data if isinstance(data, np.ndarray) else list(data)
            ).reshape(-1)
            if flat.size != rows * cols:
                raise ValueError(
                    f"data holds {flat.size} elements, expected {rows * cols}"
                )
            self.data = flat.astype(depth.dtype).reshape(rows, cols)

    @property
    def itemsize(self) -> int:
        return self.depth.itemsize

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def convert(self, depth: Depth) -> Mat:
        """Return a new matrix holding these elements cast to ``depth``.

        Floating values are truncated toward zero; integers that do not fit
        wrap around as in a plain C assignment.
        """
        converted = Mat(self.rows, self.cols, depth)
        with np.errstate(invalid="ignore", over="ignore"):
            converted.data = self.data.astype(depth.dtype)
        return converted

    def copy(self) -> Mat:
        """Return a deep copy of this matrix."""
        return self.convert(self.depth)

    def index(self, row: int, col: int) -> int:
        """Flat offset of element (``row``, ``col``) in row-major order."""
        return row * self.cols + col

    def _format_value(self, value) -> str:
        if self.depth.is_float:
            return format(float(value), "g")
        return str(int(value))

    def _lines(self) -> Iterator[str]:
        yield f"[ {self.rows} x {self.cols} ] {self.depth.label}\n"
        for row in self.data:
            yield "".join(f"{self._format_value(v)}, " for v in row) + "\n"

    def format(self) -> str:
        """Header line with shape and depth, then one line per row."""
        return "".join(self._lines())

    def show(self) -> None:
        """Print the matrix to standard output, one row per line."""
        out = sys.stdout
        for line in self._lines():
            out.write(line)
        out.flush()

    def __repr__(self) -> str:
        return f"Mat({self.rows}, {self.cols}, {self.depth.name})"