# line_buffer.py
"""
Backing store for diagnostic line geometry.

A LineBuffer stands in for a pre-allocated vertex buffer: forces push their
vertices into it through `reload`, which overwrites a range in place and
never reallocates. Between frames the viewer calls `fit` to match the
current number of forces, then reads the lines back out to draw them.
"""
import numpy as np
from typing import Iterator, Sequence, Tuple

from constants import FLOATS_PER_LINE, FLOATS_PER_VERTEX


class LineBuffer:
    """
    A fixed-size float32 array of line segments.

    Each line is two vertices of (x, y, z, r, g, b, enabled).
    """
    def __init__(self, line_count: int):
        self.line_count = int(line_count)
        self.data = np.zeros(self.line_count * FLOATS_PER_LINE, dtype=np.float32)

    def reload(self, data: Sequence[float], offset: int = 0) -> None:
        """
        Substitutes `data` into the buffer starting at element `offset`.
        """
        values = np.asarray(data, dtype=np.float32).reshape(-1)
        end = offset + values.size
        if offset < 0 or end > self.data.size:
            raise ValueError(
                f"Cannot write {values.size} floats at offset {offset} "
                f"into a buffer of {self.data.size}."
            )
        self.data[offset:end] = values

    def fit(self, line_count: int) -> None:
        """
        Prepares the buffer for a frame of `line_count` slots.

        Reallocates when the slot count changed since the last frame,
        otherwise zeroes the existing slots so lines from removed forces
        do not linger.
        """
        line_count = int(line_count)
        if line_count != self.line_count:
            self.line_count = line_count
            self.data = np.zeros(line_count * FLOATS_PER_LINE, dtype=np.float32)
        else:
            self.data[:] = 0.0

    def lines(self) -> Iterator[Tuple[np.ndarray, np.ndarray, Tuple[float, float, float], bool]]:
        """Yields (p0, p1, rgb, enabled) for every slot."""
        vertices = self.data.reshape(self.line_count, 2, FLOATS_PER_VERTEX)
        for v0, v1 in vertices:
            color = (float(v0[3]), float(v0[4]), float(v0[5]))
            yield v0[:3].copy(), v1[:3].copy(), color, bool(v0[6] > 0.5)
