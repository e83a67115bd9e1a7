import unittest

from gridpath.core.config import GridConfig
from gridpath.core.session import CellState, PathSession
from gridpath.search.astar import PathFinder
from gridpath.world.grid import GridBounds, InvalidCoordinate


class BlockedMap:
    """Offers no neighbors at all, so every non-trivial search fails."""
    def __init__(self, bounds):
        self.bounds = bounds

    def contains(self, coord):
        return self.bounds.contains(coord)

    def get_neighbors(self, coord):
        return []


class TestPathSession(unittest.TestCase):
    def setUp(self):
        self.session = PathSession()

    def test_defaults_match_six_by_six_grid(self):
        self.assertEqual(self.session.start, (0, 0))
        self.assertEqual(self.session.bounds, GridBounds(6, 6))
        self.assertEqual(self.session.current_path, [])

    def test_select_stores_path(self):
        path = self.session.select(5, 5)

        self.assertEqual(len(path), 10)
        self.assertEqual(self.session.current_path, path)
        self.assertEqual(self.session.target, (5, 5))
        self.assertEqual(self.session.last_result.path, path)

    def test_select_replaces_previous_path(self):
        self.session.select(5, 5)
        path = self.session.select(0, 2)

        self.assertEqual(path, [(0, 1), (0, 2)])
        self.assertEqual(self.session.cell_state(5, 5), CellState.EMPTY)
        self.assertEqual(self.session.cell_state(0, 2), CellState.PATH)

    def test_selecting_start_cell_keeps_current_path(self):
        path = self.session.select(3, 0)
        again = self.session.select(0, 0)

        self.assertEqual(again, path)
        self.assertEqual(self.session.target, (3, 0))

    def test_select_out_of_bounds_raises(self):
        self.session.select(1, 1)
        with self.assertRaises(InvalidCoordinate):
            self.session.select(6, 0)
        # Failed selection leaves the shown path alone
        self.assertEqual(len(self.session.current_path), 2)

    def test_current_path_is_a_copy(self):
        self.session.select(0, 3)
        self.session.current_path.clear()
        self.assertEqual(len(self.session.current_path), 3)

    def test_clear(self):
        self.session.select(2, 2)
        self.session.clear()
        self.assertEqual(self.session.current_path, [])
        self.assertIsNone(self.session.target)
        self.assertIsNone(self.session.last_result)

    def test_cell_states(self):
        self.session.select(0, 3)
        self.assertEqual(self.session.cell_state(0, 0), CellState.START)
        for col in (1, 2, 3):
            self.assertEqual(self.session.cell_state(0, col), CellState.PATH)
        self.assertEqual(self.session.cell_state(4, 4), CellState.EMPTY)
        with self.assertRaises(InvalidCoordinate):
            self.session.cell_state(0, 6)

    def test_selectable_cells_exclude_start(self):
        cells = self.session.selectable_cells()
        self.assertEqual(len(cells), 35)
        self.assertNotIn((0, 0), cells)
        self.assertEqual(cells[0], (0, 1))

    def test_custom_start_cell(self):
        session = PathSession(GridConfig(ROWS=4, COLS=4, START_CELL=(2, 2)))
        path = session.select(0, 0)
        self.assertEqual(len(path), 4)
        self.assertEqual(path[-1], (0, 0))
        self.assertNotIn((2, 2), path)

    def test_no_path_clears_previous_path(self):
        config = GridConfig()
        bounds = config.bounds()
        session = PathSession(config, finder=PathFinder(bounds, nav_map=BlockedMap(bounds)))

        path = session.select(1, 1)

        self.assertEqual(path, [])
        self.assertIsNone(session.last_result.path)
        self.assertEqual(session.target, (1, 1))


if __name__ == "__main__":
    unittest.main()
