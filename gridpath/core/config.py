from dataclasses import dataclass

from gridpath.world.grid import GridBounds


@dataclass(frozen=True)
class GridConfig:
    """Default grid layout for path sessions and the batch runner."""
    ROWS: int = 6
    COLS: int = 6
    START_CELL: tuple = (0, 0)

    # Batch runner
    EXPORT_PATH: str = "pathfinding_results.csv"

    def __post_init__(self):
        # GridBounds rejects non-positive dimensions
        bounds = self.bounds()
        if not bounds.contains(self.START_CELL):
            raise ValueError(f"Start cell {self.START_CELL} is outside a {self.ROWS}x{self.COLS} grid")

    def bounds(self) -> GridBounds:
        return GridBounds(rows=self.ROWS, cols=self.COLS)
