from __future__ import annotations

import logging
from dataclasses import dataclass, field
from heapq import heappush, heappop
from typing import Dict, List, NamedTuple, Optional, Set, Tuple

from gridpath.world.grid import Coordinate, GridBounds, PathfindingMap, manhattan

logger = logging.getLogger("PathFinder")


@dataclass
class SearchNode:
    position: Coordinate
    g: float
    h: float

    @property
    def f(self) -> float:
        return self.g + self.h


@dataclass(order=True)
class _HeapEntry:
    priority: Tuple[float, float, int, int]
    position: Coordinate = field(compare=False)
    g: float = field(compare=False)


class Frontier:
    """
    Open set of the search. Nodes are keyed by position; a heap orders them
    by (f, h, row, col). Entries left behind by an improved g or a removal
    are discarded when they surface.
    """
    def __init__(self):
        self._nodes: Dict[Coordinate, SearchNode] = {}
        self._heap: List[_HeapEntry] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def __contains__(self, position) -> bool:
        return position in self._nodes

    def get(self, position) -> Optional[SearchNode]:
        return self._nodes.get(position)

    def push(self, node: SearchNode) -> None:
        self._nodes[node.position] = node
        self._push_entry(node)

    def improve(self, position, g: float) -> bool:
        """Lower the g of a queued node. Returns False if ``g`` is no better."""
        node = self._nodes[position]
        if g >= node.g:
            return False
        node.g = g
        self._push_entry(node)
        return True

    def remove(self, position) -> SearchNode:
        return self._nodes.pop(position)

    def pop_min(self) -> SearchNode:
        while self._heap:
            entry = heappop(self._heap)
            node = self._nodes.get(entry.position)
            if node is None or node.g != entry.g:
                continue
            del self._nodes[entry.position]
            return node
        raise IndexError("pop from an empty frontier")

    def _push_entry(self, node: SearchNode) -> None:
        row, col = node.position
        heappush(
            self._heap,
            _HeapEntry(priority=(node.f, node.h, row, col), position=node.position, g=node.g),
        )


class SearchResult(NamedTuple):
    path: Optional[List[Coordinate]]
    expanded: int


class PathFinder:
    """
    A* over a 4-connected grid with unit move cost and a Manhattan heuristic.

    The instance only holds its navigation map; every search allocates its
    own frontier, visited set and predecessor map, so one PathFinder can be
    shared between callers.
    """
    def __init__(self, bounds: GridBounds, nav_map: Optional[PathfindingMap] = None):
        self.bounds = bounds
        self.nav_map: PathfindingMap = nav_map if nav_map is not None else bounds

    def find_path(self, start, target) -> Optional[List[Coordinate]]:
        """
        Shortest path from ``start`` to ``target``, excluding start and
        including target. Returns [] when start == target and None when the
        target cannot be reached.
        """
        return self.search(start, target).path

    def search(self, start, target) -> SearchResult:
        start = self.bounds.require(start, "start")
        target = self.bounds.require(target, "target")
        logger.debug(f"Searching {start} -> {target} on {self.bounds.rows}x{self.bounds.cols} grid")

        frontier = Frontier()
        frontier.push(SearchNode(position=start, g=0, h=manhattan(start, target)))

        visited: Set[Coordinate] = set()
        came_from: Dict[Coordinate, Coordinate] = {}

        while frontier:
            current = frontier.pop_min()

            if current.position == target:
                path = self._reconstruct_path(came_from, current.position)
                logger.debug(f"Reached {target} after expanding {len(visited)} nodes, path length {len(path)}")
                return SearchResult(path=path, expanded=len(visited))

            visited.add(current.position)

            for neighbor in self.nav_map.get_neighbors(current.position):
                if not self.bounds.contains(neighbor) or neighbor in visited:
                    continue

                tentative_g = current.g + 1
                existing = frontier.get(neighbor)
                if existing is None:
                    neighbor = Coordinate(*neighbor)
                    frontier.push(SearchNode(position=neighbor, g=tentative_g, h=manhattan(neighbor, target)))
                    came_from[neighbor] = current.position
                elif frontier.improve(neighbor, tentative_g):
                    came_from[existing.position] = current.position

        logger.debug(f"No path {start} -> {target}, frontier exhausted after {len(visited)} nodes")
        return SearchResult(path=None, expanded=len(visited))

    def _reconstruct_path(
        self,
        came_from: Dict[Coordinate, Coordinate],
        current: Coordinate,
    ) -> List[Coordinate]:
        path: List[Coordinate] = []
        while current in came_from:
            path.append(current)
            current = came_from[current]
        path.reverse()
        return path


def find_path(bounds: GridBounds, start, target) -> Optional[List[Coordinate]]:
    return PathFinder(bounds).find_path(start, target)
