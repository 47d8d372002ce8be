"""Fixed-capacity circular buffer of (x, y) samples for plotting and analysis."""

import numbers
from pathlib import Path
from typing import Callable, Iterator, Tuple, Union

import numpy as np


class RingBuffer:
    """
    In-memory store of the last ``capacity`` (x, y) samples.

    Until full, samples are appended in insertion order. Once full, the
    sample under the write cursor (``offset``) is overwritten and the cursor
    advances modulo ``capacity``, so the oldest sample always sits at
    ``offset``. Chronological iteration therefore starts at ``offset``,
    not at index 0.
    """

    def __init__(self, capacity: int = 2000) -> None:
        """
        Args:
            capacity: maximum number of samples kept (must be > 0).
        """
        if isinstance(capacity, bool) or not isinstance(capacity, numbers.Integral):
            raise ValueError(f"capacity must be an integer, got {capacity!r}")
        capacity = int(capacity)
        if capacity <= 0:
            raise ValueError(f"capacity must be > 0, got {capacity}")
        self._capacity = capacity
        self._data = np.zeros((capacity, 2), dtype=float)
        self._size = 0
        self._offset = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def offset(self) -> int:
        """Write cursor: index of the oldest sample once the buffer is full."""
        return self._offset

    @property
    def data(self) -> np.ndarray:
        """Stored samples in storage order, shape (size, 2). Read-only view."""
        view = self._data[: self._size]
        view.flags.writeable = False
        return view

    def is_full(self) -> bool:
        return self._size == self._capacity

    def append(self, x: float, y: float) -> None:
        """Add a sample, overwriting the oldest one when full."""
        if self._size < self._capacity:
            self._data[self._size] = (x, y)
            self._size += 1
        else:
            self._data[self._offset] = (x, y)
            self._offset = (self._offset + 1) % self._capacity

    def clear(self) -> None:
        """Empty the buffer and rewind the write cursor."""
        self._size = 0
        self._offset = 0

    def size(self) -> int:
        return self._size

    def _ordered_indices(self) -> np.ndarray:
        return (np.arange(self._size) + self._offset) % max(self._size, 1)

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        for i in self._ordered_indices():
            yield float(self._data[i, 0]), float(self._data[i, 1])

    def for_each_in_order(self, visitor: Callable[[float, float], None]) -> None:
        """Call ``visitor(x, y)`` on every sample, oldest first."""
        for x, y in self:
            visitor(x, y)

    def to_numpy(self) -> Tuple[np.ndarray, np.ndarray]:
        """Return (xs, ys) in chronological order."""
        ordered = self._data[self._ordered_indices()]
        return ordered[:, 0].copy(), ordered[:, 1].copy()

    def latest(self) -> Tuple[float, float]:
        """Most recently appended sample."""
        if self._size == 0:
            raise IndexError("latest() on an empty RingBuffer")
        i = (self._offset - 1) % self._capacity if self.is_full() else self._size - 1
        return float(self._data[i, 0]), float(self._data[i, 1])

    def to_csv(
        self,
        path: Union[str, Path],
        header: Tuple[str, str] = ("x", "y"),
        delimiter: str = ",",
    ) -> None:
        """
        Export the samples in chronological order, one row per sample.
        """
        path = Path(path)
        xs, ys = self.to_numpy()
        rows = [delimiter.join((repr(float(x)), repr(float(y)))) for x, y in zip(xs, ys)]
        path.write_text(delimiter.join(header) + "\n" + "\n".join(rows), encoding="utf-8")

    def __len__(self) -> int:
        return self._size
