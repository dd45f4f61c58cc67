"""Exception types raised by the noise core."""

from __future__ import annotations


class NoiseError(Exception):
    """Base class for errors raised by simplexgen."""


class NoiseDomainError(NoiseError, ValueError):
    """Raised when a sample point lies outside the supported lattice domain.

    The stretched, floored coordinate of every axis has to fit strictly
    inside a signed 32-bit integer. Non-finite coordinates are rejected
    as well.

    Attributes:
        coords: The coordinates that were passed to the evaluator
    """

    def __init__(self, coords: tuple[float, ...], reason: str) -> None:
        self.coords = coords
        super().__init__(f"Coordinates {coords} are outside the noise domain: {reason}")
