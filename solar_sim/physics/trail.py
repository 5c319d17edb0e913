"""Bounded per-body position history used for trajectory rendering."""

from typing import Iterator, Optional
import numpy as np


class TrailBuffer:
    """Fixed-capacity ring buffer of sampled 3D positions.

    Appending past capacity overwrites the oldest sample in place, so eviction
    costs O(1). Samples are copied on the way in and on the way out: mutating
    a body's position after sampling never changes a recorded point.

    Iteration yields points oldest to newest. Each call to ``iter()`` starts
    a new pass, so the buffer can be read any number of times. Appending or
    clearing while a pass is open makes that pass raise RuntimeError, as
    ``collections.deque`` does.
    """

    def __init__(self, capacity: int):
        """Initialize an empty trail.

        Args:
            capacity: Maximum number of samples kept (must be >= 1)
        """
        if isinstance(capacity, bool) or int(capacity) != capacity or capacity < 1:
            raise ValueError(f"Trail capacity must be a positive integer, got {capacity!r}")
        self._capacity = int(capacity)
        self._points = np.zeros((self._capacity, 3), dtype=np.float64)
        self._cursor = 0  # next slot to write
        self._count = 0
        self._mutations = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return self._count == self._capacity

    def __len__(self) -> int:
        return self._count

    def append(self, point) -> None:
        """Record a sample, evicting the oldest one when the buffer is full."""
        self._points[self._cursor] = point
        self._mutations += 1
        self._cursor = (self._cursor + 1) % self._capacity
        if self._count < self._capacity:
            self._count += 1

    def _start(self) -> int:
        # Index of the oldest sample
        return (self._cursor - self._count) % self._capacity

    def __iter__(self) -> Iterator[np.ndarray]:
        mutations = self._mutations
        start = self._start()
        for k in range(self._count):
            if self._mutations != mutations:
                raise RuntimeError("TrailBuffer mutated during iteration")
            yield self._points[(start + k) % self._capacity].copy()

    def latest(self) -> Optional[np.ndarray]:
        """Return a copy of the newest sample, or None when empty."""
        if self._count == 0:
            return None
        return self._points[(self._cursor - 1) % self._capacity].copy()

    def to_array(self) -> np.ndarray:
        """Return all samples in chronological order as an (n, 3) array."""
        if self._count == 0:
            return np.zeros((0, 3), dtype=np.float64)
        order = (self._start() + np.arange(self._count)) % self._capacity
        return self._points[order].copy()

    def clear(self) -> None:
        """Forget every sample."""
        self._cursor = 0
        self._count = 0
        self._mutations += 1

    def __repr__(self) -> str:
        return f"TrailBuffer(capacity={self._capacity}, len={self._count})"
