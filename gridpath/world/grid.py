from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Protocol, Tuple


class Coordinate(NamedTuple):
    row: int
    col: int


# Neighbour offsets in expansion order: +col, +row, -col, -row
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


class InvalidCoordinate(ValueError):
    """Raised when a start or target cell lies outside the grid."""

    def __init__(self, coordinate, role: str = "coordinate", bounds: Optional["GridBounds"] = None):
        self.coordinate = coordinate
        self.role = role
        self.bounds = bounds
        if bounds is not None:
            message = f"{role} {coordinate} is outside a {bounds.rows}x{bounds.cols} grid"
        else:
            message = f"{role} {coordinate} is not a valid grid cell"
        super().__init__(message)


class PathfindingMap(Protocol):
    def contains(self, coord: Coordinate) -> bool:
        ...

    def get_neighbors(self, coord: Coordinate) -> List[Coordinate]:
        ...


@dataclass(frozen=True)
class GridBounds:
    rows: int
    cols: int

    def __post_init__(self):
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {self.rows}x{self.cols}")

    def contains(self, coord) -> bool:
        row, col = coord
        return 0 <= row < self.rows and 0 <= col < self.cols

    def require(self, coord, role: str = "coordinate") -> Coordinate:
        """Return ``coord`` as a Coordinate, raising InvalidCoordinate if it is off the grid."""
        try:
            row, col = coord
        except (TypeError, ValueError):
            raise InvalidCoordinate(coord, role, self) from None
        if isinstance(row, bool) or isinstance(col, bool):
            raise InvalidCoordinate(coord, role, self)
        if not isinstance(row, int) or not isinstance(col, int):
            raise InvalidCoordinate(coord, role, self)
        if not self.contains((row, col)):
            raise InvalidCoordinate(coord, role, self)
        return Coordinate(row, col)

    def get_neighbors(self, coord: Coordinate) -> List[Coordinate]:
        neighbors: List[Coordinate] = []
        for dr, dc in DIRECTIONS:
            candidate = Coordinate(coord[0] + dr, coord[1] + dc)
            if self.contains(candidate):
                neighbors.append(candidate)
        return neighbors

    def cells(self) -> List[Coordinate]:
        return [Coordinate(r, c) for r in range(self.rows) for c in range(self.cols)]

    @property
    def size(self) -> int:
        return self.rows * self.cols


def manhattan(a, b) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
