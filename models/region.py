from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Region:
    """
    Rectangle in pixel coordinates. The max corner is exclusive.
    """
    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @classmethod
    def from_string(cls, value: str) -> "Region":
        """Parse 'min_x,min_y,max_x,max_y'."""
        parts = [int(p) for p in value.split(",")]
        if len(parts) != 4:
            raise ValueError(f"Region needs 4 coordinates, got: {value!r}")
        return cls(*parts)

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y

    def fits(self, rows: int, cols: int) -> bool:
        return (
            0 <= self.min_x < self.max_x <= cols
            and 0 <= self.min_y < self.max_y <= rows
        )
