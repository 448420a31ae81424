"""A growable integer vector whose unset components read as zero."""

from __future__ import annotations


class Vector:
    """Integer vector that starts with one zero component and grows on demand."""

    def __init__(self) -> None:
        self._data: list[int] = [0]

    def get(self, loc: int) -> int:
        """Return the component at ``loc``, or 0 beyond the allocated size."""
        if loc < 0:
            raise IndexError(f"location must be non-negative, got {loc}")
        return self._data[loc] if loc < len(self._data) else 0

    def set(self, loc: int, value: int) -> None:
        """Store ``value`` at ``loc``, growing the vector to twice ``loc`` if needed."""
        if loc < 0:
            raise IndexError(f"location must be non-negative, got {loc}")
        if loc >= len(self._data):
            self._data.extend([0] * (max(loc * 2, loc + 1) - len(self._data)))
        self._data[loc] = value

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Vector(size={len(self._data)})"