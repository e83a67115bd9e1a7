import logging
from enum import Enum
from typing import List, Optional

from gridpath.core.config import GridConfig
from gridpath.search.astar import PathFinder, SearchResult
from gridpath.world.grid import Coordinate

logger = logging.getLogger("PathSession")


class CellState(Enum):
    START = "start"
    PATH = "path"
    EMPTY = "empty"


class PathSession:
    """
    Selection state for a grid with a fixed start cell.

    Each selected target replaces the previously shown path. The start cell
    itself is not selectable; selecting it leaves the session untouched.
    """
    def __init__(self, config: Optional[GridConfig] = None, finder: Optional[PathFinder] = None):
        self.config = config or GridConfig()
        self.bounds = self.config.bounds()
        self.start = Coordinate(*self.config.START_CELL)
        self.finder = finder or PathFinder(self.bounds)
        self.target: Optional[Coordinate] = None
        self.last_result: Optional[SearchResult] = None
        self._path: List[Coordinate] = []

    @property
    def current_path(self) -> List[Coordinate]:
        return list(self._path)

    def select(self, row: int, col: int) -> List[Coordinate]:
        target = self.bounds.require((row, col), "target")
        if target == self.start:
            logger.debug(f"Ignoring selection of start cell {target}")
            return self.current_path

        self.clear()
        result = self.finder.search(self.start, target)
        self.target = target
        self.last_result = result
        if result.path is not None:
            self._path = result.path
            logger.info(f"Selected {target}: path of {len(result.path)} cells")
        else:
            logger.info(f"Selected {target}: no path from {self.start}")
        return self.current_path

    def clear(self) -> None:
        self._path = []
        self.target = None
        self.last_result = None

    def cell_state(self, row: int, col: int) -> CellState:
        cell = self.bounds.require((row, col))
        if cell == self.start:
            return CellState.START
        if cell in self._path:
            return CellState.PATH
        return CellState.EMPTY

    def selectable_cells(self) -> List[Coordinate]:
        return [cell for cell in self.bounds.cells() if cell != self.start]
