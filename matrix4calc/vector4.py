"""A plain four-component vector."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Vector4:
    """A vector with x, y, z and w components, all zero by default."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __str__(self) -> str:
        return f"Vector4({self.x:g}, {self.y:g}, {self.z:g}, {self.w:g})"

    def display(self) -> None:
        """Write the vector to standard output, followed by a blank line."""
        print(f"{self}\n")