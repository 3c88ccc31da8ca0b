from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Viewport:
    """Window size in logical pixels plus the display's HiDPI scale."""

    size: tuple[int, int]
    scale: float = 1.0

    def scaled_size(self) -> tuple[int, int]:
        width, height = self.size
        return int(width * self.scale), int(height * self.scale)

    def resolution(self) -> tuple[float, float]:
        width, height = self.size
        return float(width * self.scale), float(height * self.scale)

    def resized(self, width: int, height: int) -> "Viewport":
        return replace(self, size=(width, height))
