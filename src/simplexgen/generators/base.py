"""Protocols for noise sources."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class NoiseSource(Protocol):
    """Protocol for objects that evaluate noise at a point.

    Any class with a noise() method taking coordinates and returning a
    float satisfies this protocol. Implementations must be pure: the same
    coordinates always give the same value.
    """

    def noise(self, *coords: float) -> float:
        """Evaluate the noise at the given coordinates."""
        ...
